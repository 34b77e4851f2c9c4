"""Description of the configuration, system, toolset and platform in use."""

from __future__ import annotations

import platform
import sys
from enum import IntFlag

__all__ = [
    "BuildConfig",
    "BuildSystem",
    "BuildToolset",
    "BuildPlatform",
    "get_build_config",
    "get_build_system",
    "get_build_toolset",
    "get_build_platform",
]


class BuildConfig(IntFlag):
    UNKNOWN = 0
    DEBUG = 1
    DIST = 2


class BuildSystem(IntFlag):
    UNKNOWN = 0x000
    MICROSOFT = 0x001
    APPLE = 0x002
    UNIX = 0x004
    WINDOWS = 0x008
    XBOX = 0x010
    MACOSX = 0x020
    IOS = 0x040
    LINUX = 0x080
    ANDROID = 0x100


class BuildToolset(IntFlag):
    UNKNOWN = 0
    MSVC = 1
    CLANG = 2
    GCC = 4


class BuildPlatform(IntFlag):
    UNKNOWN = 0
    X86 = 1
    AMD64 = 2
    ARM32 = 4
    ARM64 = 8


_SYSTEMS = {
    "win32": BuildSystem.MICROSOFT | BuildSystem.WINDOWS,
    "cygwin": BuildSystem.MICROSOFT | BuildSystem.WINDOWS,
    "darwin": BuildSystem.APPLE | BuildSystem.UNIX | BuildSystem.MACOSX,
    "ios": BuildSystem.APPLE | BuildSystem.UNIX | BuildSystem.IOS,
    "linux": BuildSystem.UNIX | BuildSystem.LINUX,
    "android": BuildSystem.UNIX | BuildSystem.ANDROID,
}

_PLATFORMS = {
    "x86": BuildPlatform.X86,
    "i386": BuildPlatform.X86,
    "i486": BuildPlatform.X86,
    "i586": BuildPlatform.X86,
    "i686": BuildPlatform.X86,
    "x86_64": BuildPlatform.AMD64,
    "amd64": BuildPlatform.AMD64,
    "arm": BuildPlatform.ARM32,
    "armv6l": BuildPlatform.ARM32,
    "armv7l": BuildPlatform.ARM32,
    "armv8l": BuildPlatform.ARM32,
    "aarch64": BuildPlatform.ARM64,
    "arm64": BuildPlatform.ARM64,
}


def get_build_config() -> BuildConfig:
    """Debug unless the interpreter runs with optimisation, else Dist."""
    if sys.flags.optimize == 0:
        return BuildConfig.DEBUG
    return BuildConfig.DIST


def get_build_system() -> BuildSystem:
    """Flags describing the operating system family and system."""
    name = sys.platform
    if name.startswith("linux"):
        name = "linux"
    return _SYSTEMS.get(name, BuildSystem.UNKNOWN)


def get_build_toolset() -> BuildToolset:
    """The compiler family the interpreter was built with."""
    compiler = platform.python_compiler()
    if "MSC" in compiler:
        return BuildToolset.MSVC
    lowered = compiler.lower()
    if "clang" in lowered or "llvm" in lowered:
        return BuildToolset.CLANG
    if "gcc" in lowered:
        return BuildToolset.GCC
    return BuildToolset.UNKNOWN


def get_build_platform() -> BuildPlatform:
    """The processor architecture of the machine."""
    return _PLATFORMS.get(platform.machine().lower(), BuildPlatform.UNKNOWN)