"""Find dependencies declared in package.json that no source file imports."""

__version__ = "0.1.0"
