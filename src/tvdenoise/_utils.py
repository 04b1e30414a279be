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

(MIT License)


This module contains utility functions used by the denoising functions.
"""
import logging

import numpy as np
from scipy._lib._util import _asarray_validated

logger = logging.getLogger("tvdenoise")


class InvalidInput(ValueError):
    """Raised when a signal or a weight cannot be denoised."""


def as_finite_array(a):
    """Convert to an inexact ndarray, rejecting NaN, inf and odd inputs"""
    try:
        return _asarray_validated(a, check_finite=True, as_inexact=True)
    except (ValueError, TypeError) as err:
        raise InvalidInput(str(err)) from err


def check_signal(samples):
    """Check the signal and convert it to a finite 1-D float array"""
    y = np.atleast_1d(as_finite_array(samples))
    if y.ndim != 1:
        raise InvalidInput("Input signal should be 1-D.")
    if np.iscomplexobj(y):
        raise InvalidInput("Input signal should be real.")
    return y


def check_weight(weight):
    """Check the regularization weight and convert it to a float"""
    try:
        lam = float(weight)
    except (TypeError, ValueError) as err:
        raise InvalidInput("Weight should be a real scalar.") from err
    if not np.isfinite(lam):
        raise InvalidInput("Weight must be finite.")
    if lam < 0.0:
        raise InvalidInput("Weight must be non-negative.")
    return lam


def check_weights(weight, shape):
    """Check one weight per line and broadcast them to the given shape"""
    w = as_finite_array(weight)
    if np.iscomplexobj(w):
        raise InvalidInput("Weights should be real.")
    if np.any(w < 0.0):
        raise InvalidInput("Weights must be non-negative.")
    try:
        return np.broadcast_to(w.astype(np.float64), shape)
    except ValueError as err:
        raise InvalidInput(
            "Weights cannot be broadcast to one weight per line.") from err


def trivial_solution(y, lam):
    """Returns the denoised signal when it is known without a scan, else None.

    That is the case for signals of length 0 or 1, for a zero weight
    (every sample is its own plateau), for constant signals (a single
    plateau with no discrepancy to balance), and for weights at least
    max_k |sum_{i<=k} (y[i] - mean(y))|, where the whole output is the
    mean. The last case also keeps huge weights away from the kernels,
    which would lose the samples to rounding against y[0] +- lam.
    """
    n = y.shape[0]
    if n <= 1:
        logger.debug("signal of length %d is returned as is", n)
        return y.copy()
    if lam == 0.0:
        logger.debug("zero weight, returning the input")
        return y.copy()
    if np.all(y == y[0]):
        logger.debug("constant signal, returning the input")
        return y.copy()
    yd = y.astype(np.float64)
    mean = yd.mean()
    if lam >= saturation_weight(yd, mean):
        logger.debug("weight %g saturates the signal, returning the mean", lam)
        return np.full_like(y, mean)
    return None


def saturation_weight(y, mean):
    """Smallest weight for which the denoised signal is the constant mean"""
    return float(np.max(np.abs(np.cumsum(y - mean)[:-1])))


def total_variation(x):
    """Sum of the absolute jumps between adjacent samples of x."""
    x = check_signal(x)
    return float(np.sum(np.abs(np.diff(x))))


def tv_objective(samples, output, weight):
    """
    Evaluates the objective minimized by the denoising functions,

        0.5 * ||output - samples||^2 + weight * TV(output)

    for any candidate output of the same length as samples.

    Parameters
    ----------
    samples : (n) array_like, the noisy signal.
    output : (n) array_like, the candidate denoised signal.
    weight : float, the regularization weight.

    Returns
    -------
    value : float

    Raises
    ------
    InvalidInput
        If either signal is not finite and 1-D.
        If the two signals do not have the same length.
        If weight is negative or not finite.
    """
    y = check_signal(samples)
    x = check_signal(output)
    lam = check_weight(weight)
    if x.shape != y.shape:
        raise InvalidInput("Signal and output do not have the same length.")
    r = x.astype(np.float64) - y.astype(np.float64)
    return 0.5 * float(r @ r) + lam * total_variation(x)
