"""
Project constants definitions
"""

# ============================================================
# Settings Keys
# ============================================================

ENV_PARAM_USERAUTH_GSSAPI = "userauth.gssapi.enabled"
GSSAPI_ENABLED_VALUE = "true"
ENV_PREFIX = "REMOTE_SFTP_"

# ============================================================
# Session Config Keys
# ============================================================

PREFERRED_AUTHENTICATIONS = "PreferredAuthentications"
COMPRESSION_S2C = "compression.s2c"
COMPRESSION_C2S = "compression.c2s"

COMPRESSION_ON = "zlib@openssh.com,zlib,none"
COMPRESSION_OFF = "none"

# ============================================================
# Authentication Methods
# ============================================================

AUTH_PUBLICKEY = "publickey"
AUTH_KEYBOARD_INTERACTIVE = "keyboard-interactive"
AUTH_PASSWORD = "password"
AUTH_GSSAPI_WITH_MIC = "gssapi-with-mic"

BASE_AUTH_METHODS = (AUTH_PUBLICKEY, AUTH_KEYBOARD_INTERACTIVE, AUTH_PASSWORD)

# ============================================================
# Default Values
# ============================================================

DEFAULT_SSH_PORT = 22
DEFAULT_SSH_TIMEOUT = 10
SFTP_CHANNEL = "sftp"
