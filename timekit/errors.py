class ConfigError(ValueError):
    """
    Raised for invalid configuration (unknown timezone, bad YAML values).
    The CLI reports it as a one-line message without traceback.
    """
