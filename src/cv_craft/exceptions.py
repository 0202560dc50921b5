"""Exception hierarchy for the export pipeline."""


class CVCraftError(Exception):
    """Base class for all CV Craft errors."""


class ContentError(CVCraftError):
    """CV content is missing, unparsed or has nothing to render."""


class BrowserLaunchError(CVCraftError):
    """The headless browser could not be started."""


class RenderError(CVCraftError):
    """A single document failed to render to PDF."""


class MergeError(CVCraftError):
    """The per-layer PDFs could not be composited."""


class ExportError(CVCraftError):
    """An export failed as a whole. No output file was written."""
