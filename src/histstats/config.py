"""
Configuration module for histstats
"""
import os
from dotenv import load_dotenv, find_dotenv

# Find and load .env file
env_path = find_dotenv(usecwd=True)
load_dotenv(env_path)

# History configuration
HISTORY_FILE_NAME = '.zsh_history'
METADATA_PREFIX = b':'
PAYLOAD_SEPARATOR = b';'

# Report configuration
TOP_COMMANDS = 15
TOP_MAN_PAGES = 15
TOP_GIT_SUBCOMMANDS = 5
MINIMAL_TOP_COMMANDS = 10

FLAVOR_TEXTS = (
    "Your shell remembers everything.",
    "Muscle memory, quantified.",
    "Maybe it is time for a few more aliases.",
    "Somewhere a man page is feeling neglected.",
    "The history file never lies.",
)

# Logging configuration
LOG_DIR = os.getenv('HISTSTATS_LOG_DIR')  # Unset disables the file log
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
LOG_LEVEL = os.getenv('HISTSTATS_LOG_LEVEL', 'WARNING')  # DEBUG, INFO, WARNING, ERROR, CRITICAL
