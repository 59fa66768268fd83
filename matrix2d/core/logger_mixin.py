
import logging
from typing import Any, Sequence

import numpy as np
from tabulate import tabulate


class InstanceLogger(logging.LoggerAdapter):
    """A view on a shared class logger with a level of its own.

    All instances of a class write through the same :class:`logging.Logger`,
    but each adapter filters records against its own :py:attr:`level`, so
    enabling debug output for one instance leaves the others untouched.

    Parameters
    ----------
    logger : logging.Logger
        The shared class logger.
    level : int
        Lowest level this instance passes on.
    """

    def __init__(self, logger: logging.Logger, level: int):
        super().__init__(logger, {})
        self.level = level

    def setLevel(self, level):
        self.level = level

    def getEffectiveLevel(self):
        return self.level

    def isEnabledFor(self, level):
        return level >= self.level and self.logger.isEnabledFor(level)

    @property
    def handlers(self):
        return self.logger.handlers

    @property
    def propagate(self):
        return self.logger.propagate


class LoggerMixin:
    """
    A mixin class attaching a class-specific logger to every instance.

    The records of all instances go to one logger named after the module and
    class. Each instance sees it through an :class:`InstanceLogger` with its
    own level: ``WARNING`` by default, ``DEBUG`` if the instance was created
    with :python:`debug=True`. The first debug instance attaches a single
    :class:`logging.StreamHandler` to the class logger.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : InstanceLogger
        The per-instance view on the class logger.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        shared = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        shared.propagate = False

        if not shared.handlers:
            shared.addHandler(logging.NullHandler())

        # filtering happens per instance in InstanceLogger
        shared.setLevel(logging.DEBUG)

        if debug and not any(isinstance(h, logging.StreamHandler)
                             for h in shared.handlers):
            sh = logging.StreamHandler()
            sh.setFormatter(self._formatter)
            shared.addHandler(sh)

        self._logger = InstanceLogger(
            shared, logging.DEBUG if debug else logging.WARNING
        )
        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> InstanceLogger:
        """
        Returns the logger view associated with this object.

        Returns
        -------
        InstanceLogger
            The configured per-instance logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        orig_init = cls.__dict__.get("__init__")
        if orig_init is None:
            return

        def wrapped_init(self, *a, **k):
            # logger must exist before the subclass body logs anything
            LoggerMixin.__init__(self, debug=k.get("debug", False))
            return orig_init(self, *a, **k)

        wrapped_init.__doc__ = orig_init.__doc__
        cls.__init__ = wrapped_init


def table_matrix(
        matrix,
        column_names: Sequence[str] | None = None,
        row_names: Sequence[str] | None = None,
        decimals: int = 6
) -> str:
    """Render a two-dimensional array as a grid table.

    Parameters
    ----------
    matrix : array_like
        The values to render, one table row per matrix row.
    column_names : sequence of str, optional
        Column headers. Defaults to the column indices.
    row_names : sequence of str, optional
        Labels written in front of each row. Defaults to ``1, 2, ...``.
    decimals : int, default=6
        Number of decimals shown for every value.

    Returns
    -------
    str
        The table as produced by :func:`tabulate.tabulate` with the ``grid``
        format.

    Raises
    ------
    ValueError
        If the number of labels does not match the shape of `matrix`.
    """
    matrix = np.atleast_2d(np.asarray(matrix, dtype=float))
    n_rows, n_cols = matrix.shape

    if column_names is None:
        column_names = [str(i) for i in range(n_cols)]
    if row_names is None:
        row_names = list(range(1, n_rows + 1))
    if len(column_names) != n_cols or len(row_names) != n_rows:
        raise ValueError(
            f'Expected {n_rows} row and {n_cols} column names, got '
            f'{len(row_names)} and {len(column_names)}.'
        )

    data = [[label] + row.tolist() for label, row in zip(row_names, matrix)]
    return tabulate(data, headers=[''] + list(column_names), tablefmt="grid",
                    floatfmt=f".{decimals}f")
