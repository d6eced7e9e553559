"""
confgroups Configuration Constants

Fixed conventions shared by the loader and the repository.
"""

# Configuration file extension, without the leading dot
DEFAULT_EXTENSION = "yml"

# Root directory of the application's configuration groups
DEFAULT_CONFIG_PATH = "config"

DEFAULT_ENVIRONMENT = "production"

# Key syntax
KEY_SEPARATOR = "."
NAMESPACE_SEPARATOR = "::"

# Group used for "namespace::item" keys when the namespace has no such group
ASSUMED_GROUP = "config"

# Collection identifier prefix for groups without a namespace
GLOBAL_COLLECTION = "*"

# File suffixes parsed as JSON; everything else is read as YAML
JSON_SUFFIXES = (".json",)
