"""
JVM type names for signature normalization.

Every type that ends up in a CanonicalSignature is a fully qualified, dotted,
source-style name: ``int``, ``java.lang.String``, ``java.lang.Object[][]``.
"""

VOID = "void"
OBJECT = "java.lang.Object"

CONSTRUCTOR_MARKER = "<init>"
STATIC_INIT_MARKER = "<clinit>"
STATIC_INIT_HEADER = "static {}"

PRIMITIVE_DESCRIPTORS = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
    "V": "void",
}


def expand_type_name(token: str) -> str:
    """Expand a descriptor or abbreviated type token to its dotted form.

    Accepts primitive codes (``I``), object descriptors (``Ljava/lang/String;``),
    arrays of either (``[[I``, ``[Ljava.lang.String;``), varargs (``String...``)
    and names that are already expanded, which come back unchanged.
    """
    token = token.strip()
    if not token:
        return token

    dimensions = 0
    while token.startswith("["):
        dimensions += 1
        token = token[1:]

    if token in PRIMITIVE_DESCRIPTORS:
        name = PRIMITIVE_DESCRIPTORS[token]
    elif token.startswith("L") and token.endswith(";"):
        name = token[1:-1]
    else:
        name = token

    if name.endswith("..."):
        name = name[:-3] + "[]"

    return name.replace("/", ".") + "[]" * dimensions


def normalize_type_name(name: str) -> str:
    """Normalize a source-style type name as printed by javap.

    Single letters are left alone here: in source form they are type
    variables, not primitive descriptors.
    """
    name = name.strip()
    if name.endswith("..."):
        name = name[:-3] + "[]"
    return name.replace("/", ".")


def simple_class_name(fq_name: str) -> str:
    """Return the unqualified name of a class (java.lang.String -> String)."""
    return fq_name.rsplit(".", 1)[-1]


def package_name(fq_name: str) -> str:
    if "." not in fq_name:
        return ""
    return fq_name.rsplit(".", 1)[0]