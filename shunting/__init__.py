"""shunting - infix to Reverse Polish Notation converter.

Main namespace package:
- shunting.parser: normalization, tokenization, classification and the
  shunting-yard conversion itself
- shunting.core: configuration, logging and the error hierarchy
- shunting.cli: console front end
"""

__version__ = "0.1.0"

__all__ = []
