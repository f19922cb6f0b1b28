"""
date-spine - calendar arithmetic for scripting and test automation.

- datespine.core: Pure primitives (modify patterns, components, business days)
- datespine.toolkit: DateToolkit facade with clock, zone and format handling
- datespine.fix: FixToolkit generators for FIX order ids and transact times
"""

__version__ = "0.1.0"

from datespine.core import *  # noqa
from datespine.fix import FixToolkit  # noqa
from datespine.toolkit import DateToolkit  # noqa
