from pkgbuild_parser.tokens import (Array, Assignment, Comment, Function, Literal,
                                    PkgbuildSource)


def pretty_print_tokens(node, indent_level=0) -> str:
    """Provide a quick token tree view to diagnose parsing issues."""
    indent = "  " * indent_level
    match node:
        case PkgbuildSource():
            children = "\n".join(
                pretty_print_tokens(token, indent_level + 1) for token in node
            )
            if children:
                return f"{indent}{node.__class__.__name__}(\n{children}\n{indent})"
            return f"{indent}{node.__class__.__name__}()"
        case Comment():
            return f"{indent}Comment({node.text!r}) @ {node.position}"
        case Assignment(value=Literal(value=value)):
            return (
                f"{indent}Assignment({node.key!r}, "
                f"{value.__class__.__name__}({value.text!r})) @ {node.position}"
            )
        case Assignment(value=Array(values=values)):
            items = ", ".join(
                f"{value.__class__.__name__}({value.text!r})" for value in values
            )
            return f"{indent}Assignment({node.key!r}, Array([{items}])) @ {node.position}"
        case Function():
            return f"{indent}Function({node.name!r}, {node.args!r}) @ {node.position}"
        case _:
            raise ValueError(f"Unknown node type: {node}")
