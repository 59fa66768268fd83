
import math
from numbers import Real

import numpy as np

from matrix2d.core.logger_mixin import LoggerMixin, table_matrix


class Matrix3x2(LoggerMixin):
    r"""A mutable 2D affine transformation.

    The transformation is stored as a coefficient buffer of six floats
    :python:`[a, b, c, d, e, f]`, the first two rows of the homogeneous
    matrix

    .. math::
        \left(\begin{array}{ccc}
        a & b & c \\
        d & e & f \\
        0 & 0 & 1
        \end{array}\right),

    so that a point :math:`(x, y)` is mapped to
    :math:`(a x + b y + c, d x + e y + f)`.

    Every composing method (:meth:`translate`, :meth:`rotate`,
    :meth:`scale`, :meth:`multiply`, ...) changes the matrix in place and
    returns it, which allows chaining. Coefficients of argument matrices are
    copied, never referenced.

    Parameters
    ----------
    *coefficients : :any:`float`
        Either nothing, which creates a zero-filled matrix, or exactly six
        initial coefficients in buffer order.
    dtype : data-type, default=numpy.float32
        Floating-point type of the coefficient buffer. All arithmetic is
        carried out in double precision and rounded once when the result is
        stored.
    debug : :any:`bool`, default=False
        Enables debug-level logging for this instance.

    Raises
    ------
    TypeError
        If `dtype` is not a floating-point type or a coefficient is not a
        number.
    ValueError
        If a number of coefficients other than zero or six is given.

    Notes
    -----
    A new matrix is all zeros, not the identity. Call :meth:`identity`
    first when building a transformation from scratch.

    Examples
    --------
    >>> import numpy
    >>> from matrix2d import Matrix3x2, Point2D
    >>> m = Matrix3x2().identity().rotate(numpy.pi / 2).translate(1, 0)
    >>> p = m.apply(Point2D(0, 0))
    >>> round(p.x, 6), round(p.y, 6)
    (0.0, 1.0)
    """

    def __init__(self, *coefficients, dtype=np.float32, debug: bool = False):
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            raise TypeError(
                f'dtype must be a floating-point type, got {dtype!r}.'
            )
        if len(coefficients) not in (0, 6):
            raise ValueError(
                f'Expected 0 or 6 coefficients, got {len(coefficients)}.'
            )
        for name, value in zip('abcdef', coefficients):
            self._check_number(name, value)

        self.debug = debug
        self._buffer = np.zeros(6, dtype=dtype)
        if coefficients:
            self._store(*(float(v) for v in coefficients))

    @classmethod
    def from_coefficients(cls, values, dtype=np.float32, debug: bool = False):
        """Create a matrix from an iterable of six coefficients.

        Parameters
        ----------
        values : iterable of :any:`float`
            The coefficients in the order :python:`[a, b, c, d, e, f]`.
        dtype : data-type, default=numpy.float32
            Floating-point type of the coefficient buffer.
        debug : :any:`bool`, default=False
            Enables debug-level logging for the new instance.

        Raises
        ------
        ValueError
            If `values` does not hold exactly six elements.
        """
        values = list(values)
        if len(values) != 6:
            raise ValueError(
                f'A 3x2 matrix has 6 coefficients, got {len(values)}.'
            )
        return cls(*values, dtype=dtype, debug=debug)

    # COEFFICIENT ACCESS -----------------------------------------------------
    def _values(self):
        return self._buffer.tolist()

    def _store(self, a, b, c, d, e, f):
        # values beyond the buffer range are stored as inf
        with np.errstate(over='ignore', invalid='ignore'):
            self._buffer[:] = (a, b, c, d, e, f)

    @staticmethod
    def _check_number(name, value):
        if not isinstance(value, Real):
            raise TypeError(f'{name} must be a number, got {value!r}.')

    @staticmethod
    def _check_matrix(other):
        if not isinstance(other, Matrix3x2):
            raise TypeError(
                f'Expected a Matrix3x2, got {type(other).__name__}.'
            )

    @property
    def dtype(self):
        return self._buffer.dtype

    @property
    def coefficients(self):
        """A copy of the coefficient buffer.

        Returns
        -------
        :any:`numpy.array`
            The six coefficients :python:`[a, b, c, d, e, f]`. Changing the
            returned array does not change the matrix.
        """
        return self._buffer.copy()

    def to_tuple(self):
        """The six coefficients as a tuple of Python floats."""
        return tuple(self._values())

    @property
    def homogeneous(self):
        """The full 3x3 matrix including the implicit row ``[0, 0, 1]``.

        Returns
        -------
        :any:`numpy.array`
            A new 3x3 array with the dtype of the coefficient buffer.
        """
        return np.vstack((self._buffer.reshape(2, 3), (0, 0, 1))).astype(
            self._buffer.dtype
        )

    @property
    def x(self):
        """The horizontal translation :python:`c`."""
        return float(self._buffer[2])

    @property
    def y(self):
        """The vertical translation :python:`f`."""
        return float(self._buffer[5])

    @property
    def determinant(self):
        """Determinant :python:`a * e - b * d` of the linear part.

        A determinant of zero means the matrix is singular and
        :meth:`invert` will produce non-finite coefficients.
        """
        a, b, _, d, e, _ = self._values()
        return a * e - b * d

    def is_singular(self):
        """Whether the determinant is zero, i.e. the matrix has no inverse."""
        return self.determinant == 0

    def is_finite(self):
        """Whether all six coefficients are finite numbers."""
        return bool(np.isfinite(self._buffer).all())

    # COPYING ----------------------------------------------------------------
    def set(self, other):
        """Copy all coefficients of another matrix into this one.

        Parameters
        ----------
        other : :any:`Matrix3x2`
            The matrix to copy from. Its values are taken verbatim, finite
            or not.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._check_matrix(other)
        self._store(*other._values())
        self.logger.debug("Copied coefficients %s.", other.to_tuple())
        return self

    def clone(self):
        """Return an independent matrix with equal coefficients and dtype."""
        twin = type(self)(dtype=self._buffer.dtype, debug=self.debug)
        twin._buffer[:] = self._buffer
        return twin

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    # COMPOSITION ------------------------------------------------------------
    def identity(self):
        """Reset this matrix to the identity transformation.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._store(1, 0, 0, 0, 1, 0)
        return self

    def translate(self, dx, dy):
        r"""Translate within the current local frame.

        The offset :math:`(dx, dy)` is mapped through the current linear
        part before it is added, so translations follow any earlier
        rotation or scaling:

        .. math::
            c \mathrel{+}= a \, dx + b \, dy, \qquad
            f \mathrel{+}= d \, dx + e \, dy

        Parameters
        ----------
        dx, dy : :any:`float`
            The translation in local coordinates.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._check_number('dx', dx)
        self._check_number('dy', dy)
        dx, dy = float(dx), float(dy)
        a, b, c, d, e, f = self._values()
        self._store(a, b, c + (a * dx + b * dy), d, e, f + (d * dx + e * dy))
        self.logger.debug("translate(%s, %s)", dx, dy)
        return self

    def translate_absolute(self, dx, dy):
        """Translate without taking the current linear part into account.

        Only the offset terms change: :python:`c += dx` and
        :python:`f += dy`.

        Parameters
        ----------
        dx, dy : :any:`float`
            The translation in output coordinates.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._check_number('dx', dx)
        self._check_number('dy', dy)
        dx, dy = float(dx), float(dy)
        a, b, c, d, e, f = self._values()
        self._store(a, b, c + dx, d, e, f + dy)
        self.logger.debug("translate_absolute(%s, %s)", dx, dy)
        return self

    translateAbsolute = translate_absolute

    def rotate(self, angle):
        r"""Rotate by `angle` radians.

        The whole matrix, offset column included, is multiplied by the
        rotation

        .. math::
            \left(\begin{array}{cc}
            \cos(\alpha) & -\sin(\alpha) \\
            \sin(\alpha) & \cos(\alpha)
            \end{array}\right).

        Call :meth:`rotate` before :meth:`translate` to rotate around the
        local origin.

        Parameters
        ----------
        angle : :any:`float`
            Rotation angle in rad, counterclockwise.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._check_number('angle', angle)
        cos, sin = math.cos(angle), math.sin(angle)
        a, b, c, d, e, f = self._values()
        self._store(
            a * cos - d * sin, b * cos - e * sin, c * cos - f * sin,
            a * sin + d * cos, b * sin + e * cos, c * sin + f * cos
        )
        self.logger.debug("rotate(%s)", angle)
        return self

    def scale(self, factor):
        """Scale all six coefficients by `factor`.

        The offset terms are scaled as well, so translations added before
        this call are scaled with the rest of the matrix.

        Parameters
        ----------
        factor : :any:`float`
            Uniform scaling factor.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.
        """
        self._check_number('factor', factor)
        factor = float(factor)
        self._store(*(v * factor for v in self._values()))
        self.logger.debug("scale(%s)", factor)
        return self

    def multiply(self, other):
        r"""Compose this matrix with `other`.

        The result maps a point as if `other` were applied first and this
        matrix afterwards, i.e. :python:`parent.multiply(child)` turns a
        parent transformation into the one of its child:

        .. math::
            \left(\begin{array}{ccc}
            a & b & c \\
            d & e & f \\
            0 & 0 & 1
            \end{array}\right)
            \left(\begin{array}{ccc}
            a_2 & b_2 & c_2 \\
            d_2 & e_2 & f_2 \\
            0 & 0 & 1
            \end{array}\right)

        Parameters
        ----------
        other : :any:`Matrix3x2`
            The local transformation. It is read once and not modified.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.

        Notes
        -----
        The product is `self` times `other`, so `other` acts first. Code
        written for the opposite convention, where :python:`a.multiply(b)`
        applies `a` first, gets the same matrix from
        :python:`b.clone().multiply(a)`.
        """
        self._check_matrix(other)
        a2, b2, c2, d2, e2, f2 = other._values()
        a, b, c, d, e, f = self._values()
        self._store(
            a * a2 + b * d2, a * b2 + b * e2, a * c2 + b * f2 + c,
            d * a2 + e * d2, d * b2 + e * e2, d * c2 + e * f2 + f
        )
        self.logger.debug("multiply(%s)", other.to_tuple())
        return self

    def invert(self):
        """Replace this matrix by its inverse.

        Returns
        -------
        :any:`Matrix3x2`
            This matrix.

        Notes
        -----
        No error is raised for a singular matrix. The reciprocal of the
        zero determinant is infinite and the coefficients become
        :python:`inf` or :python:`nan`. Use :attr:`determinant` or
        :meth:`is_singular` to check beforehand.
        """
        a, b, c, d, e, f = self._values()
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            i = np.float64(1.0) / np.float64(a * e - b * d)
            self._store(
                i * e, i * -b, i * (b * f - c * e),
                i * -d, i * a, i * (c * d - a * f)
            )
        if not self.is_finite():
            self.logger.warning(
                "Inverted a singular matrix, coefficients are non-finite."
            )
        return self

    # APPLICATION ------------------------------------------------------------
    def apply(self, point):
        """Transform a point in place.

        Parameters
        ----------
        point : :any:`Point2D`
            Any object with writable :python:`x` and :python:`y` attributes.
            Both coordinates are read before either is written.

        Returns
        -------
        :any:`Point2D`
            The same `point`, now holding the transformed coordinates.
        """
        a, b, c, d, e, f = self._values()
        x, y = float(point.x), float(point.y)
        point.x = a * x + b * y + c
        point.y = d * x + e * y + f
        return point

    def __call__(self, point):
        """Shorthand for :meth:`apply`."""
        return self.apply(point)

    # DUNDER -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return bool(np.array_equal(self._buffer, other._buffer))

    def __repr__(self):
        a, b, c, d, e, f = self._values()
        return (
            f'{type(self).__name__}(a={a!r}, b={b!r}, c={c!r}, d={d!r}, '
            f'e={e!r}, f={f!r}, dtype={self._buffer.dtype.name})'
        )

    def __str__(self):
        return table_matrix(
            self.homogeneous, column_names=('x', 'y', '1'),
            row_names=("x'", "y'", '1')
        )


AffineTransform2D = Matrix3x2
""" Alias of :py:class:`Matrix3x2` named after what the matrix represents. """
