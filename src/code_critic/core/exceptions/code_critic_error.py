class CodeCriticError(Exception):
    """
    Base class for all code critic exceptions.
    Ensures a consistent exception hierarchy for catching pipeline-specific issues.
    """

    pass
