"""Program name and version."""

VERSION = "4.1.7-b6"
PROGRAM_NAME = "siege"