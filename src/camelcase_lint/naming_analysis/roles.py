"""Role classification of identifier occurrences.

``classify`` is a pure function of an occurrence's local context (parent,
grandparent, effective parent, and for ``ignoreDestructuring`` the ancestor
chain) and the rule options. The first matching branch decides.
"""

from dataclasses import dataclass
from enum import Enum

from camelcase_lint.code_representation.code_representation import (
    IdentifierOccurrence,
    SyntaxNode,
    node_name,
    node_type,
)

from .options import PropertiesMode, RuleOptions
from .patterns import is_camel_case, is_valid_property_name, strip_separators

CALL_TYPES = {"CallExpression", "NewExpression"}
PROPERTY_TYPES = {"Property", "AssignmentPattern"}
IMPORT_TYPES = {"ImportSpecifier", "ImportNamespaceSpecifier", "ImportDefaultSpecifier"}


class Role(Enum):
    PLAIN_REFERENCE = "plain-reference"
    MEMBER_ACCESS_OBJECT = "member-access-object"
    MEMBER_ACCESS_PROPERTY = "member-access-property"
    ASSIGNMENT_TARGET = "assignment-target"
    PROPERTY_KEY = "property-key"
    DESTRUCTURING_BINDING = "destructuring-binding"
    DESTRUCTURING_DEFAULT = "destructuring-default"
    IMPORT_BINDING = "import-binding"


@dataclass(frozen=True)
class Verdict:
    role: Role
    violation: bool
    reason: str


def classify(occurrence: IdentifierOccurrence, options: RuleOptions) -> Verdict:
    parent_type = node_type(occurrence.parent)
    if parent_type == "MemberExpression":
        return _classify_member_access(occurrence, options)
    if parent_type in PROPERTY_TYPES:
        return _classify_property(occurrence, options)
    if parent_type in IMPORT_TYPES:
        return _classify_import(occurrence)

    name = strip_separators(occurrence.name)
    if node_type(occurrence.effective_parent) in CALL_TYPES:
        return Verdict(Role.PLAIN_REFERENCE, False, "call-target")
    return Verdict(Role.PLAIN_REFERENCE, not is_camel_case(name), "camel-case")


def is_property_assignment(occurrence: IdentifierOccurrence) -> bool:
    """True when the occurrence names the property assigned to, as in ``obj.<name> = value``."""
    effective_parent = occurrence.effective_parent
    if node_type(effective_parent) != "AssignmentExpression":
        return False
    left = effective_parent.child("left")
    if node_type(left) != "MemberExpression":
        return False
    return node_name(left.child("property")) == occurrence.name


def _classify_member_access(
    occurrence: IdentifierOccurrence,
    options: RuleOptions,
) -> Verdict:
    member = occurrence.parent
    effective_parent = occurrence.effective_parent
    name = strip_separators(occurrence.name)
    role = (
        Role.MEMBER_ACCESS_OBJECT
        if member.child("object") is occurrence.node
        else Role.MEMBER_ACCESS_PROPERTY
    )

    if options.properties is PropertiesMode.NEVER:
        return Verdict(role, False, "properties-never")

    accessed = member.child("object")
    if (
        node_type(accessed) == "Identifier"
        and accessed.name == occurrence.name
        and not is_camel_case(name)
    ):
        return Verdict(Role.MEMBER_ACCESS_OBJECT, True, "object-name")

    if is_property_assignment(occurrence) and not is_valid_property_name(
        name,
        options.properties_style,
    ):
        return Verdict(Role.MEMBER_ACCESS_PROPERTY, True, "assigned-property")

    if (
        node_type(effective_parent) == "AssignmentExpression"
        and node_type(effective_parent.child("right")) != "MemberExpression"
        and not is_camel_case(name)
    ):
        return Verdict(Role.ASSIGNMENT_TARGET, True, "assignment")

    return Verdict(role, False, "member-access")


def _classify_property(occurrence: IdentifierOccurrence, options: RuleOptions) -> Verdict:
    node = occurrence.node
    parent = occurrence.parent
    name = strip_separators(occurrence.name)

    if node_type(occurrence.grandparent) == "ObjectPattern":
        verdict = _classify_destructuring(occurrence, parent, options)
        if verdict is not None:
            return verdict

    role = _property_role(node, parent)
    if options.properties is PropertiesMode.NEVER:
        return Verdict(role, False, "properties-never")
    if options.ignore_destructuring and occurrence.is_inside("ObjectPattern"):
        return Verdict(role, False, "ignore-destructuring")

    # The paired key/value or default value is checked on its own visit.
    if node_type(occurrence.effective_parent) in CALL_TYPES:
        return Verdict(role, False, "call-argument")
    if parent.child("right") is node:
        return Verdict(role, False, "default-value")

    if is_property_assignment(occurrence):
        valid = is_valid_property_name(name, options.properties_style)
    else:
        valid = is_camel_case(name)
    return Verdict(role, not valid, "property")


def _classify_destructuring(
    occurrence: IdentifierOccurrence,
    pattern_property: SyntaxNode,
    options: RuleOptions,
) -> Verdict | None:
    """Apply the object-pattern sub-rules; ``None`` falls through to the generic rule."""
    node = occurrence.node
    name = strip_separators(occurrence.name)
    key = pattern_property.child("key")
    value = pattern_property.child("value")

    if (
        pattern_property.shorthand
        and value is not None
        and value.child("left") is not None
        and not is_camel_case(name)
    ):
        return Verdict(Role.DESTRUCTURING_DEFAULT, True, "shorthand-default")

    self_bound = node_name(key) == node_name(value)
    if not self_bound and key is node:
        return Verdict(Role.DESTRUCTURING_BINDING, False, "renamed-source")

    if (
        node_name(value)
        and not is_camel_case(name)
        and not (self_bound and options.ignore_destructuring)
    ):
        return Verdict(Role.DESTRUCTURING_BINDING, True, "destructured-binding")
    return None


def _property_role(node: SyntaxNode, parent: SyntaxNode) -> Role:
    if parent.type == "AssignmentPattern":
        return Role.DESTRUCTURING_DEFAULT
    if parent.child("key") is node:
        return Role.PROPERTY_KEY
    return Role.PLAIN_REFERENCE


def _classify_import(occurrence: IdentifierOccurrence) -> Verdict:
    # Only the local binding is ours to name; tested by identity so an
    # explicit alias equal to the imported name is still reported once.
    if occurrence.parent.child("local") is not occurrence.node:
        return Verdict(Role.IMPORT_BINDING, False, "imported-name")
    name = strip_separators(occurrence.name)
    return Verdict(Role.IMPORT_BINDING, not is_camel_case(name), "local-binding")
