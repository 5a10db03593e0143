"""
Constants Module - Centralized configuration values
===================================================

PURPOSE: Single source of truth for constants shared by the ledger,
         the persistence layer and the console front end
PATTERN: Modular constants organized by category
"""

# Train Configuration
DEFAULT_TRAIN_CAPACITY = 10
FIRST_TICKET_NUMBER = 1

# Timestamps
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Storage
DEFAULT_DATA_DIRECTORY = 'data'
CONFIRMED_FILE_NAME = 'confirmed.csv'
WAITING_FILE_NAME = 'waiting.csv'

# Logging
DEFAULT_LOG_DIRECTORY = 'logs/latest_log'

# Console Menu
MENU_BOOK = 1
MENU_CANCEL = 2
MENU_LIST = 3
MENU_EXIT = 0
