from typing import Final

# Settings location, relative to the user's home directory
CONFIG_DIR_PARTS: Final = (".config", "keybindings")
CONFIG_FILE_NAME: Final = "config.yml"

# Longest line accepted in a scanned config file, in UTF-8 bytes (64 KiB)
MAX_LINE_LENGTH: Final = 64 * 1024

# Table header labels
BINDING_HEADER: Final = "Binding"
DEFINITION_HEADER: Final = "Definition"
