"""
Copyright (c) 2026 The tvdenoise developers

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""
import logging

import numpy as np

from ._utils import (
        InvalidInput,
        as_finite_array,
        check_signal,
        check_weight,
        check_weights,
        trivial_solution,
        )

logger = logging.getLogger("tvdenoise")


def _fill(x, start, stop, value):
    """Writes value on x[start..stop], at least once, and returns the
    first index after the written run."""
    stop = max(start, stop)
    x[start:stop + 1] = value
    return stop + 1


def _direct(y, lam, x):
    """Condat's direct algorithm on the list of floats y, writing into x.

    The open segment starts at k0 and currently ends at k. vmin and vmax
    are the lowest and highest values it could still settle on, umin and
    umax the running discrepancies between the samples and those values.
    kminus (kplus) is the last position where umin (umax) was tight.
    A discrepancy landing exactly on +-lam extends the segment; only a
    strict violation opens a jump.

    Returns the number of plateaus written.
    """
    n = len(y)
    twolam = 2.0 * lam
    minlam = -lam
    k = k0 = kminus = kplus = 0
    vmin = y[0] - lam
    vmax = y[0] + lam
    umin = lam
    umax = minlam
    plateaus = 0
    while True:
        if k == n - 1:
            # end of the signal, the open segment is settled with the same
            # rule: jump if a bound is still violated, else flush it
            if umin < 0.0:
                k = k0 = kminus = _fill(x, k0, kminus, vmin)
                vmin = y[k]
                umin = lam
                umax = vmin + umin - vmax
            elif umax > 0.0:
                k = k0 = kplus = _fill(x, k0, kplus, vmax)
                vmax = y[k]
                umax = minlam
                umin = vmax + umax - vmin
            else:
                vmin += umin / (k - k0 + 1)
                x[k0:] = vmin
                return plateaus + 1
            plateaus += 1
            continue

        umin += y[k + 1] - vmin
        if umin < minlam:
            # negative jump after kminus
            k = k0 = kminus = kplus = _fill(x, k0, kminus, vmin)
            vmin = y[k]
            vmax = vmin + twolam
            umin = lam
            umax = minlam
            plateaus += 1
            continue

        umax += y[k + 1] - vmax
        if umax > lam:
            # positive jump after kplus
            k = k0 = kminus = kplus = _fill(x, k0, kplus, vmax)
            vmax = y[k]
            vmin = vmax - twolam
            umin = lam
            umax = minlam
            plateaus += 1
            continue

        k += 1
        if umin >= lam:
            kminus = k
            vmin += (umin - lam) / (kminus - k0 + 1)
            umin = lam
        if umax <= minlam:
            kplus = k
            vmax += (umax + lam) / (kplus - k0 + 1)
            umax = minlam


def _taut_string(y, lam, x):
    """Taut-string algorithm on the list of floats y, writing into x.

    The string is threaded through the tube [r - lam, r + lam] around the
    running sum r of y, pinned at both ends. index_low/slope_low hold the
    vertices of the convex hull of the lower tube wall seen from the last
    knot, index_up/slope_up the concave hull of the upper wall. s_* is the
    bottom and c_* the top of each stack; index/z hold the knots found so
    far, c being the last one.

    Returns the number of plateaus written.
    """
    width = len(y) + 1
    index = [0] * width
    index_low = [0] * width
    index_up = [0] * width
    slope_low = [0.0] * width
    slope_up = [0.0] * width
    z = [0.0] * width
    y_low = [0.0] * width
    y_up = [0.0] * width

    y_low[1] = y[0] - lam
    y_up[1] = y[0] + lam
    for i in range(2, width):
        y_low[i] = y_low[i - 1] + y[i - 1]
        y_up[i] = y_up[i - 1] + y[i - 1]
    # the string ends on the running sum itself
    y_low[width - 1] += lam
    y_up[width - 1] -= lam

    slope_low[0] = np.inf
    slope_up[0] = -np.inf
    s_low = c_low = s_up = c_up = c = 0

    for i in range(1, width):
        c_low += 1
        c_up += 1
        index_low[c_low] = index_up[c_up] = i

        slope_low[c_low] = y_low[i] - y_low[i - 1]
        while c_low > s_low + 1 and slope_low[c_low - 1] <= slope_low[c_low]:
            c_low -= 1
            index_low[c_low] = i
            if c_low > s_low + 1:
                j = index_low[c_low - 1]
                slope_low[c_low] = (y_low[i] - y_low[j]) / (i - j)
            else:
                slope_low[c_low] = (y_low[i] - z[c]) / (i - index[c])

        slope_up[c_up] = y_up[i] - y_up[i - 1]
        while c_up > s_up + 1 and slope_up[c_up - 1] >= slope_up[c_up]:
            c_up -= 1
            index_up[c_up] = i
            if c_up > s_up + 1:
                j = index_up[c_up - 1]
                slope_up[c_up] = (y_up[i] - y_up[j]) / (i - j)
            else:
                slope_up[c_up] = (y_up[i] - z[c]) / (i - index[c])

        # the hulls cross: the bottom vertex of the other hull is a knot
        while (c_low == s_low + 1 and c_up > s_up + 1
               and slope_low[c_low] >= slope_up[s_up + 1]):
            c += 1
            s_up += 1
            index[c] = index_up[s_up]
            z[c] = y_up[index[c]]
            index_low[s_low] = index[c]
            slope_low[c_low] = (y_low[i] - z[c]) / (i - index[c])
        while (c_up == s_up + 1 and c_low > s_low + 1
               and slope_up[c_up] <= slope_low[s_low + 1]):
            c += 1
            s_low += 1
            index[c] = index_low[s_low]
            z[c] = y_low[index[c]]
            index_up[s_up] = index[c]
            slope_up[c_up] = (y_up[i] - z[c]) / (i - index[c])

    # what is left on the lower hull ends the string
    for i in range(1, c_low - s_low + 1):
        index[c + i] = index_low[s_low + i]
        z[c + i] = y_low[index[c + i]]
    c += c_low - s_low

    # the slope of the string between two knots is the plateau value
    for i in range(1, c + 1):
        x[index[i - 1]:index[i]] = (z[i] - z[i - 1]) / (index[i] - index[i - 1])
    return c


def _solve(kernel, y, lam):
    """Runs kernel on a validated signal, short-circuiting trivial cases"""
    x = trivial_solution(y, lam)
    if x is not None:
        return x
    x = np.empty_like(y)
    plateaus = kernel(y.tolist(), lam, x)
    logger.debug("%s: %d samples, %d plateaus", kernel.__name__, y.shape[0],
                 plateaus)
    return x


def denoise(samples, weight):
    """
    Computes the exact total variation denoising of a 1-D signal, that is
    the solution x of

        min  0.5 * ||x - samples||^2 + weight * sum_i |x[i+1] - x[i]|

    The solution is piecewise constant: neighbouring samples are fused
    into plateaus, and larger weights fuse more of them.
    This uses the direct, non-iterative algorithm of Condat, which scans
    the signal once from left to right and settles every plateau as soon
    as the optimality conditions show that the output must jump there.
    The work is linear in the number of samples in practice.

    Parameters
    ----------
    samples : (n) array_like
        The signal to denoise. Must be 1-D and finite. n may be zero.
    weight : float
        The regularization weight. Must be finite and non-negative.

    Returns
    -------
    x : (n) ndarray
        The denoised signal, newly allocated. It has the dtype of samples
        when that is a floating dtype, float64 otherwise.

    Raises
    ------
    InvalidInput
        If samples is not 1-D.
        If samples contains NaN or inf, or cannot be read as real numbers.
        If weight is negative or not finite.

    Notes
    -----
    1. With weight = 0 the output is an exact copy of the input, and so it
    is for signals of length 0 or 1 and for constant signals.

    2. For weights at least max_k |sum_{i<=k} (samples[i] - mean(samples))|
    the whole output is the mean of the samples.

    3. Ties are settled in one fixed direction: when the running
    discrepancy of a segment lands exactly on +weight or -weight the
    segment is extended, and a jump is only opened on a strict violation.
    Repeated calls on the same input therefore return identical outputs.

    4. The arithmetic is carried out in double precision; the result is
    cast back to the dtype of samples.

    Example
    -------
    >>> denoise([1.0, 2.0, 3.0, 4.0, 5.0], 0.0)
    array([1., 2., 3., 4., 5.])
    >>> denoise([1.0, 2.0, 3.0, 4.0, 5.0], 10.0)
    array([3., 3., 3., 3., 3.])

    References
    ----------
    L. Condat, "A Direct Algorithm for 1D Total Variation Denoising",
    IEEE Signal Processing Letters 20(11), 2013.
    """
    y = check_signal(samples)
    lam = check_weight(weight)
    return _solve(_direct, y, lam)


def tautstring(samples, weight):
    """
    Computes the exact total variation denoising of a 1-D signal with the
    taut-string algorithm. It solves the same problem as denoise(),

        min  0.5 * ||x - samples||^2 + weight * sum_i |x[i+1] - x[i]|

    and returns the same solution up to rounding.

    The running sum of the samples is surrounded by a tube of half width
    weight, and a string pinned at both ends is pulled taut inside it.
    The derivative of the taut string is the denoised signal. The string
    is built in a single pass that keeps the lower and upper hulls of the
    tube on two stacks, then a backward pass writes the slope between
    consecutive knots to every sample they span.

    Parameters
    ----------
    samples : (n) array_like
        The signal to denoise. Must be 1-D and finite. n may be zero.
    weight : float
        The regularization weight. Must be finite and non-negative.

    Returns
    -------
    x : (n) ndarray
        The denoised signal, newly allocated, with the same dtype rules as
        denoise().

    Raises
    ------
    InvalidInput
        If samples is not 1-D.
        If samples contains NaN or inf, or cannot be read as real numbers.
        If weight is negative or not finite.

    Notes
    -----
    The algorithm works on running sums of the samples, so rounding errors
    grow with the length of the signal and with the size of its values.
    Prefer denoise() for long signals or signals with a large offset.

    References
    ----------
    P. L. Davies and A. Kovac, "Local Extremes, Runs, Strings and
    Multiresolution", The Annals of Statistics 29(1), 2001.
    """
    y = check_signal(samples)
    lam = check_weight(weight)
    return _solve(_taut_string, y, lam)


def denoise_along_axis(data, weight, axis=-1):
    """
    Denoises every 1-D line of an array along the given axis, for instance
    every row of an image or every channel of a multichannel time series.

    Each line is handled by an independent call of denoise(); this is not
    a 2-D total variation. The lines do not share any state.

    Parameters
    ----------
    data : array_like
        The signals to denoise, at least 1-D and finite.
    weight : float or array_like
        The regularization weight, either one for all lines or one per
        line. In the latter case it must broadcast to the shape of data
        with axis removed. Must be finite and non-negative.
    axis : int, optional
        The axis along which the lines run. Default is the last one.

    Returns
    -------
    x : ndarray
        The denoised lines, with the shape of data.

    Raises
    ------
    InvalidInput
        If data is 0-D, or axis is out of range.
        If data contains NaN or inf, or cannot be read as real numbers.
        If a weight is negative or not finite, or weight does not
        broadcast to one weight per line.

    Example
    -------
    Denoise the rows of an image with a weight of 0.5, and its columns
    with a different weight for each column:

        rows = denoise_along_axis(img, 0.5, axis=1)
        cols = denoise_along_axis(img, np.linspace(0.1, 1.0, img.shape[1]),
                                  axis=0)
    """
    data = as_finite_array(data)
    if data.ndim == 0:
        raise InvalidInput("Input data should be at least 1-D.")
    if np.iscomplexobj(data):
        raise InvalidInput("Input data should be real.")
    try:
        lines = np.moveaxis(data, axis, -1)
    except (ValueError, TypeError) as err:
        raise InvalidInput(str(err)) from err
    shape = lines.shape
    weights = check_weights(weight, shape[:-1]).ravel()
    if lines.size == 0:
        return data.copy()

    lines = lines.reshape(-1, shape[-1])
    out = np.empty_like(lines)
    for i in range(lines.shape[0]):
        out[i] = _solve(_direct, lines[i], float(weights[i]))
    return np.moveaxis(out.reshape(shape), -1, axis)
