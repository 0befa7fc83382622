class PodaggregateError(Exception):
    pass


# Invalid target definitions or ambiguous integration settings
class ConfigurationError(PodaggregateError, ValueError):
    pass


# The bound user project does not match what the aggregate expects
class IntegrationError(PodaggregateError, RuntimeError):
    pass


# A path was requested before its base directory is known
class PathError(PodaggregateError, ValueError):
    pass
