"""routecov - route coverage reports from parsed route trees and trace dumps."""

__version__ = "0.1.0"
