"""Shared constants for pathsync."""

# Install root layout
DEFAULT_INSTALL_SUBDIR = ".toolchain"
BIN_DIR_NAME = "bin"
ENV_SCRIPT_NAME = "env.sh"
SETTINGS_FILE_NAME = "settings.toml"

# Environment variables consumed
SHELL_ENV_VAR = "SHELL"
HOME_ENV_VAR = "HOME"
ZDOTDIR_ENV_VAR = "ZDOTDIR"
INSTALL_ROOT_ENV_VAR = "TOOLCHAIN_HOME"

# Token written instead of the literal home directory when the install root is the default
HOME_TOKEN = "$HOME"

# Recognized shell startup files
PROFILE = ".profile"
BASH_RC_FILES = (".bashrc", ".bash_profile", ".bash_login")
ZSHENV = ".zshenv"
ZPROFILE = ".zprofile"

# Files that older releases wrote the inline export into
LEGACY_RC_FILES = (".bash_profile", ".profile", ".zprofile")
