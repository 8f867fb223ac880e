"""Fixed vocabularies shared by the function and call extractors."""

from __future__ import annotations

# Language keywords, shader built-ins and common runtime globals that look
# like calls or definitions to the templates but never name a user function.
_RESERVED = {
    "if", "else", "for", "while", "do", "switch", "case", "default", "break",
    "continue", "return", "discard", "struct", "uniform", "varying", "attribute",
    "const", "in", "out", "inout", "float", "int", "void", "bool", "vec2", "vec3",
    "vec4", "mat2", "mat3", "mat4", "sampler2D", "samplerCube", "gl_Position",
    "gl_FragColor", "texture2D", "texture", "normalize", "length", "dot", "cross",
    "pow", "exp", "log", "exp2", "log2", "sqrt", "inversesqrt", "abs", "sign",
    "floor", "ceil", "fract", "mod", "min", "max", "clamp", "mix", "step",
    "smoothstep", "sin", "cos", "tan", "asin", "acos", "atan", "radians", "degrees",
    "console", "window", "document", "function", "var", "let", "class",
    "new", "this", "super", "typeof", "instanceof", "delete", "async", "await",
    "try", "catch", "finally", "throw", "import", "export", "require", "module",
}

RESERVED_WORDS = frozenset(word.lower() for word in _RESERVED)

# Leading tokens of the typed-signature template that are return types, in
# which case the second identifier is the function name.
PRIMITIVE_TYPES = frozenset(
    {
        "void", "int", "float", "double", "bool", "uint",
        "vec2", "vec3", "vec4", "ivec2", "ivec3", "ivec4",
        "uvec2", "uvec3", "uvec4", "mat2", "mat3", "mat4",
        "sampler2D", "samplerCube",
    }
)


def is_reserved(name: str) -> bool:
    return name.lower() in RESERVED_WORDS
