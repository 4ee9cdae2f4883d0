"""
controllers package
~~~~~~~~~~~~~~~~~~~
    from controllers import SvgController
"""
from .svg_controller import SvgController  # noqa: F401
