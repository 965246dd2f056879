__title__ = "exitpolicy"
__description__ = "Resolve and validate RFC 062 process exit codes for command-line runs"
__url__ = "https://github.com/exitpolicy/exitpolicy"
__version__ = "1.0.0"
__license__ = "Apache-2.0"
