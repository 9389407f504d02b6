"""as-pydantic: pydantic models from declarative model metadata.

Usage:
    from as_pydantic import Model, model, prop, required, min_length, model_to_schema

    @model()
    class Address(Model):
        street: str = prop(required(), min_length(2))

    AddressSchema = model_to_schema(Address)
    AddressSchema.model_validate({"street": "Main St 1"})
"""

__version__ = "0.1.0"

from .metadata import (
    Metadata,
    ModelMetadata,
    Model,
    ValidationKeys,
    registry,
    prop,
    model,
    required,
    type_,
    list_of,
    set_of,
    description,
    minimum,
    maximum,
    min_length,
    max_length,
    step,
    pattern,
    email,
    url,
    password,
    date_format,
)
from .errors import (
    SchemaSynthesisError,
    MissingTypeError,
    UnknownTypeError,
    ConversionError,
    InvalidRefinementError,
)
from .validation import (
    synthesize_model,
    attribute_results,
    register_constraint,
)
from .integration import (
    model_to_schema,
    model_to_schema_result,
    install,
    uninstall,
    is_installed,
)

Metadata.register_library("as-pydantic", __version__)

__all__ = [
    "__version__",
    # Metadata
    "Metadata",
    "ModelMetadata",
    "Model",
    "ValidationKeys",
    "registry",
    "prop",
    "model",
    "required",
    "type_",
    "list_of",
    "set_of",
    "description",
    "minimum",
    "maximum",
    "min_length",
    "max_length",
    "step",
    "pattern",
    "email",
    "url",
    "password",
    "date_format",
    # Errors
    "SchemaSynthesisError",
    "MissingTypeError",
    "UnknownTypeError",
    "ConversionError",
    "InvalidRefinementError",
    # Synthesis
    "synthesize_model",
    "attribute_results",
    "register_constraint",
    "model_to_schema",
    "model_to_schema_result",
    "install",
    "uninstall",
    "is_installed",
]
