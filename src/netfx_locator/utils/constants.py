# Shared constants used across the package

# Win32 limits
MAX_PATH = 260
INT_MAX = 2**31 - 1

# Size of a UTF-16 code unit, the registry's native character width
CHAR_SIZE = 2

# Registry hives, named as the winreg module names them
HKEY_LOCAL_MACHINE = "HKEY_LOCAL_MACHINE"
HKEY_CURRENT_USER = "HKEY_CURRENT_USER"
HKEY_CLASSES_ROOT = "HKEY_CLASSES_ROOT"
HKEY_USERS = "HKEY_USERS"
REGISTRY_HIVES = (
    HKEY_LOCAL_MACHINE,
    HKEY_CURRENT_USER,
    HKEY_CLASSES_ROOT,
    HKEY_USERS,
)

# Registry value types (same numbering as winreg)
REG_NONE = 0
REG_SZ = 1
REG_EXPAND_SZ = 2
REG_BINARY = 3
REG_DWORD = 4
REG_MULTI_SZ = 7
REG_QWORD = 11

# Win32 error codes surfaced through LookupResult.error_code
ERROR_SUCCESS = 0
ERROR_FILE_NOT_FOUND = 2
ERROR_ACCESS_DENIED = 5
ERROR_OUTOFMEMORY = 14
ERROR_GEN_FAILURE = 31
ERROR_INVALID_PARAMETER = 87
ERROR_MORE_DATA = 234
ERROR_UNSUPPORTED_TYPE = 1630

# HRESULTs
S_OK = 0
E_OUTOFMEMORY = 0x8007000E
FACILITY_WIN32 = 7

# Private runtime overrides honoured by the CLR
COMPLUS_VERSION = "COMPLUS_Version"
COMPLUS_INSTALL_ROOT = "COMPLUS_InstallRoot"

# Framework install root, combined with COMPLUS_Version
DOTNET_FRAMEWORK_REGKEY = r"Software\Microsoft\.NETFramework"
DOTNET_FRAMEWORK_INSTALLROOT_REGVALUE = "InstallRoot"

# Full v4 install path, already version specific
FRAMEWORK_REGKEY = r"Software\Microsoft\Net Framework Setup\NDP\v4\Client"
FRAMEWORK_INSTALLPATH_REGVALUE = "InstallPath"

# WPF keeps its own DLLs in a subdirectory of the framework directory
WPF_SUBDIR = "WPF"
