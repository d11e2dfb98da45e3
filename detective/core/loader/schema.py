"""JSON schema definitions for the mansion layout and suspect rules.

Layout rooms nest through ``left``/``right``. Length limits here count
characters; byte limits are checked semantically by the loader.
"""

MAX_NAME_BYTES = 63
MAX_CLUE_BYTES = 127

MANSION_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$ref": "#/$defs/room",
    "$defs": {
        "room": {
            "type": "object",
            "required": ["name"],
            "properties": {
                "name": {"type": "string", "minLength": 1, "maxLength": MAX_NAME_BYTES},
                "clue": {"type": ["string", "null"], "maxLength": MAX_CLUE_BYTES},
                "left": {"$ref": "#/$defs/room"},
                "right": {"$ref": "#/$defs/room"}
            },
            "additionalProperties": False
        }
    }
}

SUSPECT_RULES_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["clue", "suspect"],
        "properties": {
            "clue": {"type": "string", "minLength": 1, "maxLength": MAX_CLUE_BYTES},
            "suspect": {"type": "string", "minLength": 1, "maxLength": MAX_NAME_BYTES}
        },
        "additionalProperties": False
    }
}
