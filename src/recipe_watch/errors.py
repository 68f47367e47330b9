"""Exception types raised by recipe-watch."""


class RecipeWatchError(Exception):
    """Base class for all recipe-watch errors."""


class DocumentError(RecipeWatchError):
    """A recipe document could not be read or decoded."""


class ManifestError(DocumentError):
    """A manifest or monitoring document is structurally invalid."""


class LookupFailed(RecipeWatchError):
    """The release-tracking service could not answer for a project."""


class UpdaterError(RecipeWatchError):
    """The external updater could not be started."""
