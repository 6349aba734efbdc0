class PrDraftError(RuntimeError):
    """Fatal condition that ends the run with a non-zero exit status."""


class MissingDependencyError(PrDraftError):
    """A required command line tool is not installed."""


class MissingCredentialError(PrDraftError):
    """A required credential is absent from the environment."""


class ConfigurationError(PrDraftError):
    """A configuration value could not be parsed."""


class GitCommandError(PrDraftError):
    """A git command needed to build the change-set failed."""


class PushFailedError(PrDraftError):
    """The current branch could not be pushed to the remote."""


class GenerationTransportError(PrDraftError):
    """The text generation endpoint could not be reached or refused the request."""


class GenerationEmptyResponseError(PrDraftError):
    """The text generation endpoint returned no usable text."""


class EditorError(PrDraftError):
    """The interactive editor could not be started."""


class SubmissionFailedError(PrDraftError):
    """The hosting CLI failed to open the pull request."""
