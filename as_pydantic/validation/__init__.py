"""Schema synthesis.

Compiles declarative model metadata into pydantic models: the resolver
maps type descriptors to schemas, constraints fold refinements onto them,
the attribute synthesizer builds one field and the builder assembles the
model.

Usage:
    from as_pydantic.validation import synthesize_model

    AddressSchema = synthesize_model(Address)
    AddressSchema.model_validate({"street": "Main St 1"})
"""

from .annotated import (
    Ge,
    Le,
    MinLen,
    MaxLen,
    MultipleOf,
    Pattern,
    UniqueItems,
)
from .resolver import (
    PRIMITIVES,
    COLLECTIONS,
    safe_invoke,
    type_name,
    normalize_types,
    resolve_name,
    resolve_model,
    resolve_type,
)
from .constraints import (
    ConstraintHandler,
    apply_constraint,
    register_constraint,
)
from .attribute import (
    RESERVED_KEYS,
    synthesize_attribute,
    carries_description,
    is_optional,
)
from .builder import (
    SchemaBuilder,
    infer_type,
    synthesize_model,
    attribute_results,
)

__all__ = [
    # Refinements
    "Ge",
    "Le",
    "MinLen",
    "MaxLen",
    "MultipleOf",
    "Pattern",
    "UniqueItems",
    # Resolver
    "PRIMITIVES",
    "COLLECTIONS",
    "safe_invoke",
    "type_name",
    "normalize_types",
    "resolve_name",
    "resolve_model",
    "resolve_type",
    # Constraints
    "ConstraintHandler",
    "apply_constraint",
    "register_constraint",
    # Attributes
    "RESERVED_KEYS",
    "synthesize_attribute",
    "carries_description",
    "is_optional",
    # Models
    "SchemaBuilder",
    "infer_type",
    "synthesize_model",
    "attribute_results",
]
