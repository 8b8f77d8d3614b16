"""Exception classes for the zonebench package."""


class ZoneBenchBaseException(Exception):
    """A base exception for the zonebench package."""

    def __init__(self, message: str):
        """Initialize the exception with a message."""
        self.message = message
        super().__init__(self.message)


class InvalidThickness(ZoneBenchBaseException):
    """An error raised when a material layer has a non-positive thickness."""

    def __init__(self, kind: str, thickness: float):
        """Initialize the exception with a message.

        Args:
            kind (str): The kind of material that was requested.
            thickness (float): The offending thickness [m].
        """
        self.kind = kind
        self.thickness = thickness
        self.message = (
            f"Material {kind} requires a positive thickness, got {thickness} m"
        )
        super().__init__(self.message)


class EmptyConstruction(ZoneBenchBaseException):
    """An error raised when a construction is requested without any layers."""

    def __init__(self, name: str):
        """Initialize the exception with a message.

        Args:
            name (str): The name of the construction.
        """
        self.name = name
        self.message = f"Construction {name} requires at least one layer"
        super().__init__(self.message)


class WindowExceedsSurface(ZoneBenchBaseException):
    """An error raised when a window does not fit in its host surface."""

    def __init__(
        self,
        surface_width: float,
        surface_height: float,
        window_width: float,
        window_height: float,
    ):
        """Initialize the exception with a message.

        Args:
            surface_width (float): The width of the host surface [m].
            surface_height (float): The height of the host surface [m].
            window_width (float): The width of the window [m].
            window_height (float): The height of the window [m].
        """
        self.surface_width = surface_width
        self.surface_height = surface_height
        self.window_width = window_width
        self.window_height = window_height
        self.message = (
            f"Window of {window_width}x{window_height} m does not fit in "
            f"surface of {surface_width}x{surface_height} m"
        )
        super().__init__(self.message)


class NegativePower(ZoneBenchBaseException):
    """An error raised when a load is requested with a negative power."""

    def __init__(self, load: str, power: float):
        """Initialize the exception with a message.

        Args:
            load (str): The kind of load (e.g. heater, luminaire).
            power (float): The offending power [W].
        """
        self.load = load
        self.power = power
        self.message = (
            f"The {load} power must be a finite, non-negative number, got {power} W"
        )
        super().__init__(self.message)


class CollaboratorError(ZoneBenchBaseException):
    """An error raised by the simulation model or the state registry."""

    pass
