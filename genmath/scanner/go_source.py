"""Tree-sitter powered reader for Go top-level declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import ParseError
from ..models import FieldDecl, FunctionDecl, ScanResult, SourceLocation, TypeDecl, ValueDecl

GO_LANGUAGE = Language(tree_sitter_go.language())

_PARAMETER_NODES = {"parameter_declaration", "variadic_parameter_declaration"}
_TYPE_SPEC_NODES = {"type_spec", "type_alias"}


def is_exported(name: str) -> bool:
    """Go visibility rule: exported identifiers start with an uppercase letter."""
    return name[:1].isupper()


class GoSourceParser:
    """Parses one Go file and collects its exported top-level declarations.

    Methods (functions with a receiver) are skipped. Constants and variables
    yield one entry per exported name; each type spec yields one entry.
    """

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def parse_file(self, path: Path) -> ScanResult:
        try:
            source_bytes = path.read_bytes()
        except OSError as exc:
            raise ParseError(f"failed to read file {path}: {exc}") from exc
        return self.parse_source(source_bytes, str(path))

    def parse_source(self, source_bytes: bytes, path: str) -> ScanResult:
        tree = self._parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            row, column = bad.start_point
            snippet = self._node_text(bad, source_bytes).splitlines()[:1]
            near = f" near {snippet[0]!r}" if snippet and snippet[0].strip() else ""
            raise ParseError(f"failed to parse file {path}:{row + 1}:{column + 1}: syntax error{near}")

        functions: List[FunctionDecl] = []
        constants: List[ValueDecl] = []
        variables: List[ValueDecl] = []
        types: List[TypeDecl] = []
        for child in root.named_children:
            if child.type == "function_declaration":
                function = self._function(child, source_bytes, path)
                if function is not None:
                    functions.append(function)
            elif child.type == "const_declaration":
                constants.extend(self._values(child, "const_spec", source_bytes, path))
            elif child.type == "var_declaration":
                variables.extend(self._values(child, "var_spec", source_bytes, path))
            elif child.type == "type_declaration":
                types.extend(self._types(child, source_bytes, path))
        return ScanResult(
            functions=tuple(functions),
            constants=tuple(constants),
            variables=tuple(variables),
            types=tuple(types),
        )

    # ------------------------------------------------------------------
    # Functions

    def _function(self, node: Node, source_bytes: bytes, path: str) -> Optional[FunctionDecl]:
        name_node = node.child_by_field_name("name")
        name = self._node_text(name_node, source_bytes) if name_node else ""
        if not is_exported(name):
            return None

        params_node = node.child_by_field_name("parameters")
        params = tuple(self._fields(params_node, source_bytes)) if params_node else ()

        result = node.child_by_field_name("result")
        if result is None:
            results: tuple[FieldDecl, ...] = ()
        elif result.type == "parameter_list":
            results = tuple(self._fields(result, source_bytes))
        else:
            results = (self._unnamed_field(result, source_bytes),)

        signature = "func"
        type_params = node.child_by_field_name("type_parameters")
        if type_params is not None:
            signature += self._node_text(type_params, source_bytes)
        signature += self._node_text(params_node, source_bytes) if params_node else "()"
        if result is not None:
            signature += " " + self._node_text(result, source_bytes)

        return FunctionDecl(
            name=name,
            params=params,
            results=results,
            signature=signature,
            location=_location(node, path),
        )

    def _fields(self, parameter_list: Node, source_bytes: bytes) -> Iterator[FieldDecl]:
        for child in parameter_list.named_children:
            if child.type not in _PARAMETER_NODES:
                continue
            names = tuple(
                self._node_text(name, source_bytes)
                for name in child.children_by_field_name("name")
                if name.type == "identifier"
            )
            type_node = child.child_by_field_name("type")
            type_text = self._node_text(type_node, source_bytes) if type_node else ""
            if child.type == "variadic_parameter_declaration":
                yield FieldDecl(names=names, type_text="..." + type_text, type_name=None)
            else:
                yield FieldDecl(names=names, type_text=type_text, type_name=_type_name(type_node, type_text))

    def _unnamed_field(self, type_node: Node, source_bytes: bytes) -> FieldDecl:
        type_text = self._node_text(type_node, source_bytes)
        return FieldDecl(names=(), type_text=type_text, type_name=_type_name(type_node, type_text))

    # ------------------------------------------------------------------
    # Constants and variables

    def _values(self, node: Node, spec_type: str, source_bytes: bytes, path: str) -> Iterator[ValueDecl]:
        for spec in _specs(node, spec_type):
            names = [name for name in spec.children_by_field_name("name") if name.type == "identifier"]
            value_node = spec.child_by_field_name("value")
            if value_node is None:
                values: List[Node] = []
            elif value_node.type == "expression_list":
                values = [value for value in value_node.named_children if value.type != "comment"]
            else:
                values = [value_node]
            for index, name_node in enumerate(names):
                name = self._node_text(name_node, source_bytes)
                if not is_exported(name):
                    continue
                value = self._node_text(values[index], source_bytes) if index < len(values) else ""
                yield ValueDecl(name=name, value=value, location=_location(name_node, path))

    # ------------------------------------------------------------------
    # Types

    def _types(self, node: Node, source_bytes: bytes, path: str) -> Iterator[TypeDecl]:
        specs = [child for child in node.named_children if child.type in _TYPE_SPEC_NODES]
        grouped = any(child.type == "(" for child in node.children)
        group_doc = self._doc_comment(node, source_bytes)
        for spec in specs:
            name_node = spec.child_by_field_name("name")
            name = self._node_text(name_node, source_bytes) if name_node else ""
            if not is_exported(name):
                continue
            parts = [group_doc] if group_doc else []
            if grouped:
                spec_doc = self._doc_comment(spec, source_bytes)
                if spec_doc:
                    parts.append(spec_doc)
                parts.append("type " + self._node_text(spec, source_bytes))
            else:
                parts.append(self._node_text(node, source_bytes))
            yield TypeDecl(name=name, declaration="\n".join(parts), location=_location(spec, path))

    def _doc_comment(self, node: Node, source_bytes: bytes) -> str:
        """Return the comment group directly above ``node`` (no blank line between)."""
        comments: List[Node] = []
        current = node
        sibling = node.prev_named_sibling
        while sibling is not None and sibling.type == "comment":
            end_row, _ = sibling.end_point
            start_row, _ = current.start_point
            if end_row + 1 < start_row:
                break
            if not _starts_line(sibling, source_bytes):
                break
            comments.append(sibling)
            current = sibling
            sibling = sibling.prev_named_sibling
        return "\n".join(self._node_text(comment, source_bytes) for comment in reversed(comments))

    @staticmethod
    def _node_text(node: Node, source_bytes: bytes) -> str:
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def _specs(node: Node, spec_type: str) -> Iterable[Node]:
    for child in node.named_children:
        if child.type == spec_type:
            yield child
        elif child.type.endswith("_spec_list"):
            yield from _specs(child, spec_type)


def _type_name(type_node: Optional[Node], type_text: str) -> Optional[str]:
    if type_node is not None and type_node.type == "type_identifier":
        return type_text
    return None


def _starts_line(comment: Node, source_bytes: bytes) -> bool:
    # A trailing comment after code on the same line is not documentation.
    line_start = source_bytes.rfind(b"\n", 0, comment.start_byte) + 1
    return not source_bytes[line_start : comment.start_byte].strip()


def _first_error(node: Node) -> Node:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error(child)
    return node


def _location(node: Node, path: str) -> SourceLocation:
    row, _ = node.start_point
    return SourceLocation(path=path, line=row + 1)


__all__ = ["GO_LANGUAGE", "GoSourceParser", "is_exported"]
