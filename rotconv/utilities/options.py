from dataclasses import dataclass, fields, replace

from typing import Dict, TypeVar, Any

from abc import ABCMeta


OptionsT = TypeVar('OptionsT', bound='UserOptions')


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set the tunable constants used by the routines that accept them.

    Example:
        ConversionTolerances contains the thresholds used by the rotation conversion kernels.

    Custom objects built from this abstract class should follow the naming scheme <concept>Options or <concept>Tolerances
    and be passed to the keyword argument of the routine that consumes them.  Validation of the values belongs in
    :meth:`override_options`, which is invoked once the dataclass has been initialized.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var : int = 1234

        >>> opts = ExampleOptions()
        >>> print(opts.options_dict)
        ...     {'example_var': 1234}
    """

    def __post_init__(self):
        self.override_options()

    def override_options(self):
        '''
        This method is used for special cases when certain options should be checked or overwritten
        '''
        pass

    def copy_with(self: OptionsT, **changes: Any) -> OptionsT:
        """
        Return a new options instance with the given fields replaced.

        The new instance goes through :meth:`override_options` again so invalid values are still caught.

        :param changes: the fields to replace, as keyword arguments
        :return: the updated copy
        """
        return replace(self, **changes)

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        Determine the options input to the dataclass.

        This property method will ignore all internal properties and functions
        """

        return {field.name: getattr(self, field.name) for field in fields(self)}
