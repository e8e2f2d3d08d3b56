"""Escape Markdown syntax inside math before handing text to an engine."""

from mathguard import preprocess

source = r"""
Inline: $a_1 * b_1 = [x]_*$ stays math, *this* stays emphasis.

Escaped dollars are plain text: \$5 and \$10.

`$code$` is never touched.

$$\begin{align} x^2 \\
y_2 \\
\end{align}$$
"""

print(preprocess(source))
