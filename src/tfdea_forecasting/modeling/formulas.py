import keyword


def formula_term(name: str) -> str:
    """Quote a column name for a patsy formula unless it is a plain identifier."""
    name = str(name)
    if name.isidentifier() and not keyword.iskeyword(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'Q("{escaped}")'


def build_formula(dependent: str, independent: list[str]) -> str:
    """dependent ~ a + b + ...; an intercept-only model when nothing is selected."""
    terms = " + ".join(formula_term(name) for name in independent) or "1"
    return f"{formula_term(dependent)} ~ {terms}"
