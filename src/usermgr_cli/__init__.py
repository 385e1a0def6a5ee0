"""usermgr - manage a remote user collection from the command line."""

__version__ = "0.1.0"
