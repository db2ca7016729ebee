# Normalizer.py
"""""
Turns raw user input into the canonical, space separated form the tokenizer splits.

    normalize(" 2 * --x+(  )3")  ->  "2 * +x + 3"

Signs in front of an operand (at the start, or after an operator or '(') stay
attached to it, every other operator / parenthesis is surrounded by single spaces.
"""""
import re

# Characters that are split off as their own token
Operators_And_Parens = "^*/+-()"
# A '+'/'-' right after one of these is a sign, not a binary operator
Sign_Predecessors = "^*/+-("

_whitespace = re.compile(r"\s+")


def collapse_signs(clean_expr):
    """Merge redundant sign runs and drop empty '()' groups.

    Repeats the whole pass until nothing changes, because removing '()' or
    merging '+-' can produce a fresh '--' or '++'.
    """
    previous = None
    while previous != clean_expr:
        previous = clean_expr
        clean_expr = clean_expr.replace("--", "+")
        while "++" in clean_expr:
            clean_expr = clean_expr.replace("++", "+")
        while "+-" in clean_expr:
            clean_expr = clean_expr.replace("+-", "-")
        while "-+" in clean_expr:
            clean_expr = clean_expr.replace("-+", "-")
        while "()" in clean_expr:
            clean_expr = clean_expr.replace("()", "")
    return clean_expr


def normalize(raw):
    """Return the canonical form of raw (None or blank input gives '')."""
    if raw is None:
        return ""

    clean_expr = collapse_signs(_whitespace.sub("", raw))

    builder = []
    for b, current_char in enumerate(clean_expr):
        is_sign = current_char in "+-" and (b == 0 or clean_expr[b - 1] in Sign_Predecessors)

        if is_sign:
            # Unary sign: glue to the following operand
            builder.append(current_char)
        elif current_char in Operators_And_Parens:
            if builder and builder[-1] != " ":
                builder.append(" ")
            builder.append(current_char)
            builder.append(" ")
        else:
            builder.append(current_char)

    return "".join(builder).strip()
