"""
Signature cipher compiler and decipherer.
Brace and statement scanning ported from yt-dlp's jsinterp.py.

YouTube scrambles the ``s`` parameter of protected stream URLs. The player
script contains a short function that unscrambles it:

    Cz=function(a){a=a.split("");Bz.Fq(a,33);Bz.Xu(a,24);Bz.ZF(a,2);return a.join("")};

where each ``Bz`` helper is one of three primitives:

    Xu:function(a){a.reverse()}                                  -> Reverse
    ZF:function(a,b){a.splice(0,b)}                              -> Slice(b)
    Fq:function(a,b){var c=a[0];a[0]=a[b%a.length];a[b%a.length]=c}  -> Swap(b)

Helper and parameter names change with every player release, so helpers are
identified by the shape of their body, never by name.
"""

import logging
import re
from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ParseError

logger = logging.getLogger(__name__)

_NAME_RE = r"[a-zA-Z_$][\w$]*"

# Call sites that hand the scrambled signature to the decipher function, most specific first
_DECIPHER_CALL_PATTERNS = (
    r"\b[cs]\s*&&\s*[adf]\.set\([^,]+\s*,\s*encodeURIComponent\s*\(\s*(?P<name>[\w$]+)\(",
    r"\b[\w$]+\s*&&\s*[\w$]+\.set\([^,]+\s*,\s*(?:encodeURIComponent\s*\(\s*)?(?P<name>[\w$]+)\(",
    r"\bm=(?P<name>[\w$]{2,})\(decodeURIComponent\(h\.s\)\)",
    r"(?<![\w$.])(?P<name>[\w$]{2,})\s*=\s*function\(\s*(?P<arg>[\w$]+)\s*\)\s*\{\s*"
    r"(?P=arg)\s*=\s*(?P=arg)\.split\(\s*(?:\"\"|'')\s*\)",
)

# a=a.split("") / return a.join("")
_FRAMING_RE = re.compile(
    r"^(?:return\s+)?(?:[\w$]+\s*=\s*)?[\w$]+\.(?:split|join)\(\s*(?:\"\"|'')\s*\)$"
)

# Bz.Fq(a,33) / Bz["Fq"](a,33) / Fq(a,33) / a=Bz.Fq(a,33)
_HELPER_CALL_RE = re.compile(
    r"^(?:[\w$]+\s*=\s*)?"
    r"(?:(?P<obj>[\w$]+)(?:\.|\[\s*[\"']))?(?P<func>[\w$]+)(?:[\"']\s*\])?"
    r"\(\s*(?P<target>[\w$]+)\s*(?:,\s*(?P<arg>\d+)\s*)?\)$"
)


class ReverseOperation(BaseModel):
    """Reverse the whole signature."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reverse"] = "reverse"

    def apply(self, signature: str) -> str:
        return signature[::-1]


class SliceOperation(BaseModel):
    """Drop the first ``count`` characters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["slice"] = "slice"
    count: int = Field(..., ge=0)

    def apply(self, signature: str) -> str:
        return signature[self.count :]


class SwapOperation(BaseModel):
    """Exchange the first character with the one at ``index`` (modulo length)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["swap"] = "swap"
    index: int = Field(..., ge=0)

    def apply(self, signature: str) -> str:
        if not signature:
            return signature
        position = self.index % len(signature)
        chars = list(signature)
        chars[0], chars[position] = chars[position], chars[0]
        return "".join(chars)


SignatureOperation = Annotated[
    ReverseOperation | SliceOperation | SwapOperation,
    Field(discriminator="kind"),
]


def decipher(operations: Iterable[SignatureOperation], signature: str) -> str:
    """Apply cipher operations to a signature, in order."""
    for operation in operations:
        signature = operation.apply(signature)
    return signature


class CompiledCipher(BaseModel):
    """The operation list recovered from one player script."""

    model_config = ConfigDict(frozen=True)

    source_url: str = ""
    operations: tuple[SignatureOperation, ...] = ()

    def decipher(self, signature: str) -> str:
        return decipher(self.operations, signature)


# ----------------------------------------------------------------------
# Compiler
# ----------------------------------------------------------------------


def compile_cipher(player_js: str, source_url: str = "") -> CompiledCipher:
    """
    Recover the signature operations from player script text.

    Raises:
        ParseError: the decipher function, one of its helpers, or the shape
            of one of its statements could not be recognised.
    """
    func_name = _find_decipher_function_name(player_js)
    if not func_name:
        raise ParseError("signature decipher function name")

    function = _find_function(player_js, func_name)
    if function is None:
        raise ParseError(f"signature decipher function {func_name!r}")
    _, body = function

    helper_kinds: dict[tuple[str | None, str], str] = {}
    objects: dict[str, dict[str, tuple[list[str], str]]] = {}
    operations: list[SignatureOperation] = []

    for stmt in _split_statements(body):
        stmt = stmt.strip()
        if not stmt or _FRAMING_RE.match(stmt):
            continue

        call = _HELPER_CALL_RE.match(stmt)
        if not call:
            raise ParseError(f"cipher statement {stmt!r}")

        key = (call.group("obj"), call.group("func"))
        if key not in helper_kinds:
            helper_kinds[key] = _resolve_helper_kind(player_js, key, objects)
        kind = helper_kinds[key]

        literal = call.group("arg")
        if kind == "reverse":
            operations.append(ReverseOperation())
        elif literal is None:
            raise ParseError(f"{kind} argument in cipher statement {stmt!r}")
        elif kind == "slice":
            operations.append(SliceOperation(count=int(literal)))
        else:
            operations.append(SwapOperation(index=int(literal)))

    logger.debug(
        "Compiled signature cipher %s from %s: %d operations",
        func_name,
        source_url or "<inline>",
        len(operations),
    )
    return CompiledCipher(source_url=source_url, operations=tuple(operations))


def _find_decipher_function_name(code: str) -> str | None:
    for pattern in _DECIPHER_CALL_PATTERNS:
        match = re.search(pattern, code)
        if match:
            return match.group("name")
    return None


def _resolve_helper_kind(
    code: str,
    key: tuple[str | None, str],
    objects: dict[str, dict[str, tuple[list[str], str]]],
) -> str:
    obj_name, func_name = key
    if obj_name:
        if obj_name not in objects:
            objects[obj_name] = _find_object(code, obj_name)
        helper = objects[obj_name].get(func_name)
    else:
        helper = _find_function(code, func_name)

    label = f"{obj_name}.{func_name}" if obj_name else func_name
    if helper is None:
        raise ParseError(f"cipher helper {label!r}")

    kind = _classify_helper(*helper)
    if kind is None:
        raise ParseError(f"cipher helper {label!r} (unknown operation)")
    return kind


def _classify_helper(args: list[str], body: str) -> str | None:
    """Tell reverse/slice/swap helpers apart by what they do to their first argument."""
    if not args:
        return None
    target = re.escape(args[0])

    if re.search(rf"(?<![\w$]){target}\.reverse\(\s*\)", body):
        return "reverse"
    if re.search(rf"(?<![\w$]){target}\.splice\(\s*0\s*,", body):
        return "slice"
    if re.search(rf"return\s+{target}\.slice\(", body):
        return "slice"
    if re.search(rf"var\s+[\w$]+\s*=\s*{target}\[\s*0\s*\]", body):
        return "swap"
    return None


def _find_function(code: str, name: str) -> tuple[list[str], str] | None:
    """Return (argument names, body) of a named function, or None."""
    name_re = re.escape(name)
    match = re.search(
        rf"(?<![\w$.])(?:function\s+{name_re}|(?:var\s+)?{name_re}\s*=\s*function)"
        rf"\s*\((?P<args>[^)]*)\)\s*\{{",
        code,
    )
    if not match:
        return None
    body = _find_matching_brace(code, match.end() - 1)
    return _split_args(match.group("args")), body


def _find_object(code: str, name: str) -> dict[str, tuple[list[str], str]]:
    """Return the methods of an object literal as {name: (argument names, body)}."""
    match = re.search(rf"(?<![\w$.])(?:var\s+)?{re.escape(name)}\s*=\s*\{{", code)
    if not match:
        return {}

    obj_body = _find_matching_brace(code, match.end() - 1)
    methods = {}
    for m in re.finditer(
        rf"(?P<quote>[\"']?)(?P<key>{_NAME_RE})(?P=quote)\s*:\s*function\s*\((?P<args>[^)]*)\)\s*\{{",
        obj_body,
    ):
        methods[m.group("key")] = (
            _split_args(m.group("args")),
            _find_matching_brace(obj_body, m.end() - 1),
        )
    return methods


def _split_args(args: str) -> list[str]:
    return [a.strip() for a in args.split(",") if a.strip()]


def _find_matching_brace(code: str, start: int) -> str:
    """Return the content between the brace at *start* and its matching close."""
    depth = 0
    in_string = None
    escape = False

    for i in range(start, len(code)):
        c = code[i]
        if escape:
            escape = False
            continue
        if c == "\\" and in_string:
            escape = True
            continue
        if c in ('"', "'", "`") and in_string is None:
            in_string = c
        elif c == in_string:
            in_string = None
        elif in_string is None:
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    return code[start + 1 : i]

    raise ParseError("matching closing brace in player script")


def _split_statements(code: str) -> list[str]:
    """Split code into statements on top-level semicolons, respecting brackets and strings."""
    statements = []
    current = []
    depth = 0
    in_string = None
    escape = False

    for c in code:
        if escape:
            current.append(c)
            escape = False
            continue
        if c == "\\" and in_string:
            current.append(c)
            escape = True
            continue

        if c in ('"', "'", "`") and in_string is None:
            in_string = c
        elif c == in_string:
            in_string = None
        elif in_string is None:
            if c in ("{", "(", "["):
                depth += 1
            elif c in ("}", ")", "]"):
                depth -= 1
            elif c == ";" and depth == 0:
                statements.append("".join(current))
                current = []
                continue
        current.append(c)

    remaining = "".join(current).strip()
    if remaining:
        statements.append(remaining)
    return statements
