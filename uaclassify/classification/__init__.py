"""Rule-based classification of user agent strings."""

from .engine import UAParser, create_default_parser
from .fields import (
    CopyField,
    FieldSpec,
    LiteralField,
    MappedField,
    SubstituteField,
    SubstituteTransformField,
    TransformField,
    decode_field_spec,
)
from .mappings import MAPPING_TABLES, MappingTable, lookup, lookup_by_name
from .matcher import Rule, RuleGroup, match
from .postprocess import major_version, process_browser, process_device, process_os
from .rules import RuleSet, compile_group, compile_rule, get_default_rule_set
from .transforms import TRANSFORMS, TransformFunction

__all__ = [
    # Parser
    "UAParser",
    "create_default_parser",
    # Rule Set
    "RuleSet",
    "Rule",
    "RuleGroup",
    "compile_rule",
    "compile_group",
    "get_default_rule_set",
    "match",
    # Field Specs
    "FieldSpec",
    "CopyField",
    "LiteralField",
    "TransformField",
    "SubstituteField",
    "MappedField",
    "SubstituteTransformField",
    "decode_field_spec",
    # Mappings and Transforms
    "MappingTable",
    "MAPPING_TABLES",
    "lookup",
    "lookup_by_name",
    "TransformFunction",
    "TRANSFORMS",
    # Post-processing
    "major_version",
    "process_browser",
    "process_device",
    "process_os",
]
