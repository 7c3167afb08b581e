"""markdown-dsl exception hierarchy.

Rendering is total: once a tree is built it always renders. Everything here is
raised while a tree is being *constructed* (or while settings and declarative
documents are being loaded), so callers see problems before any text exists.

Usage:
    from markdown_dsl.exceptions import MarkdownDslError, UnsupportedElementError

    try:
        builder.add(element)
    except UnsupportedElementError as e:
        print(f"{e.container} cannot hold {e.element}")
    except MarkdownDslError as e:
        print(f"markdown-dsl error: {e}")
"""


class MarkdownDslError(Exception):
    """Base exception for all markdown-dsl errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch them with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Construction Errors


class ConstructionError(MarkdownDslError):
    """Base class for errors raised while building an element tree."""

    pass


class UnsupportedElementError(ConstructionError):
    """Element kind not accepted by a container.

    Raised when ``add()`` is given an element that the container's
    capability set does not include, e.g. a heading inside a paragraph.
    """

    def __init__(self, container: str, element: str) -> None:
        self.container = container
        self.element = element
        super().__init__(f"{container} cannot contain {element} elements")


class BuilderFinalizedError(ConstructionError):
    """Builder used after ``build()``.

    Builders are single-use: once they have produced their element they
    refuse further children and a second ``build()``.
    """

    def __init__(self, builder: str) -> None:
        self.builder = builder
        super().__init__(f"{builder} has already been built")


# Validation Errors


class InvalidArgumentError(MarkdownDslError):
    """Invalid argument passed to a builder operation."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class ConfigurationError(MarkdownDslError):
    """Error in render settings.

    Raised when a settings file is not valid YAML or its ``markdown:``
    section does not match the settings schema.
    """

    pass


class DocumentSpecError(MarkdownDslError):
    """Invalid declarative document description."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid document spec '{source}': {reason}")
