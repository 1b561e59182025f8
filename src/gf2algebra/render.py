"""Text and LaTeX renderings of polynomial functions, one row per output bit."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .polynomial import PolynomialFunctionRepresentationGF2


class PolynomialLabeling:
    """Maps variable indices to display names.

    Each group ``(name, count)`` labels the next ``count`` variables as
    ``name_{0}`` .. ``name_{count-1}``.
    """

    def __init__(self, *groups: Tuple[str, int]) -> None:
        self.groups: List[Tuple[str, int]] = []
        for name, count in groups:
            if count < 0:
                raise ValueError(f"Label group {name!r} has negative size {count}.")
            self.groups.append((name, int(count)))

    def __len__(self) -> int:
        return sum(count for _, count in self.groups)

    def latex_label(self, index: int) -> str:
        offset = index
        for name, count in self.groups:
            if offset < count:
                return f"{name}_{{{offset}}}"
            offset -= count
        raise IndexError(f"No label for variable {index}; labeling covers {len(self)}.")

    def var_list(self) -> str:
        return ", ".join(name for name, _ in self.groups)


def _row_monomials(f: PolynomialFunctionRepresentationGF2, row: int) -> List:
    return [m for m, bits in f.terms() if (bits >> row) & 1]


def to_string(f: PolynomialFunctionRepresentationGF2) -> str:
    lines = []
    for row in range(f.output_length):
        lines.append(" + ".join(m.to_string_monomial() for m in _row_monomials(f, row)) + "\n")
    return "".join(lines)


def to_latex_string(
    f: PolynomialFunctionRepresentationGF2,
    function_name: str = "f",
    labeling: Optional[PolynomialLabeling] = None,
    var: str = "\\mathbf x",
) -> str:
    if labeling is None:
        labeling = PolynomialLabeling((var, f.input_length))
    parts = [
        "\\begin{equation}\n",
        f"{function_name}({labeling.var_list()}) = \\left[ \\begin{{array}}{{c}}\n",
    ]
    last_row = f.output_length - 1
    for row in range(f.output_length):
        labels = [m.to_latex_string_monomial(labeling) for m in _row_monomials(f, row)]
        parts.append(" + ".join(labels))
        parts.append("\n" if row == last_row else " \\\\\n")
    parts.append("\\end{array} \\right]\n\\end{equation} ")
    return "".join(parts).strip()


__all__ = ["PolynomialLabeling", "to_string", "to_latex_string"]
