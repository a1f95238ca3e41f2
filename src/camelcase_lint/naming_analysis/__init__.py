from .analyzer import CamelCaseRule
from .options import PropertiesMode, PropertiesStyle, RuleOptions
from .reporter import Violation, ViolationReporter
from .roles import Role, Verdict, classify

__all__ = [
    "CamelCaseRule",
    "PropertiesMode",
    "PropertiesStyle",
    "Role",
    "RuleOptions",
    "Verdict",
    "Violation",
    "ViolationReporter",
    "classify",
]
