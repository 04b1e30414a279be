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


PURPOSE

Tvdenoise is a package for removing noise from step-like 1-D signals
(sensor traces, genomic tracks, single rows or columns of an image) while
keeping their sharp transitions, which a linear smoother would blur.
It computes the exact total variation denoising of the signal, that is
the proximal operator of the 1-D total variation.

EXAMPLE

Let
y = [1.0, 2.1, 5.2, 8.2, 1.4, 5.2, 6.2, 10.1]

We look for the signal x which stays close to y but has few and small
jumps. For a weight lam, x minimizes
   0.5 * sum((x - y)**2) + lam * sum(abs(x[1:] - x[:-1]))

With lam = 3, denoise(y, 3.0) returns
   x = [3.05, 3.05, 4.933, 4.933, 4.933, 5.2, 6.2, 7.1]
                                 (rounded to three decimal places)

The first two samples have been fused into one plateau, and so have the
next three. With lam = 0 nothing is fused and x is y itself. With a large
enough lam, say 100, every sample is fused and x is the mean of y,
   x = [4.925, 4.925, 4.925, 4.925, 4.925, 4.925, 4.925, 4.925]

USAGE

(1) To denoise a signal y with a regularization weight lam, call
   x = denoise(y, lam)
y can be any 1-D sequence of finite numbers and lam any finite number
greater than or equal to zero. Otherwise InvalidInput is raised.
This is the direct algorithm of Condat and should be the default choice.

(2) The same solution can be computed with the taut-string algorithm,
   x = tautstring(y, lam)
It is mainly useful to compare the two algorithms. It works on running
sums of y and loses precision on very long signals.

(3) To denoise every row of an image, or every channel of a multichannel
time series, call
   x = denoise_along_axis(data, lam, axis)
lam can also hold one weight per line.

(4) To compare candidate outputs, tv_objective(y, x, lam) evaluates the
objective above and total_variation(x) its regularization term.

Logging goes to the "tvdenoise" logger, at debug level only.
"""
from ._tvdenoise import (
        denoise,
        tautstring,
        denoise_along_axis,
        )
from ._utils import (
        InvalidInput,
        total_variation,
        tv_objective,
        )

__version__ = "1.0.0"
