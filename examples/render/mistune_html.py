"""Render math-bearing Markdown to HTML with mistune.

Requires: pip install mathguard[render]
"""

from mathguard import DiagnosticCollector, MathMarkdown
from mathguard.renderers.mistune import create_renderer

renderer = create_renderer(plugins=["table"])
diagnostics = DiagnosticCollector()

source = """
| quantity | formula |
|----------|---------|
| energy   | $E = mc^2$ |

$$\\sum_{i=1}^{n} i = \\frac{n(n+1)}{2} \\\\
\\int_0^1 x^2 dx = \\frac{1}{3}$$

$$\\begin{cases} a \\\\
b
\\end{cases}$$
"""

md = MathMarkdown(source, renderer=renderer, sink=diagnostics)
print(md.to_html())

for diagnostic in diagnostics:
    print("warning:", diagnostic)
