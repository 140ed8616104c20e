from .errors import ExpressionError
from .interpreter import Interpreter


def run_expressions(expressions, debug=False):
    """Run a session of expressions through a fresh interpreter.

    Args:
        expressions (list): Expression strings, evaluated in order
        debug (bool): If True, outputs the final variable table in CSV format

    Returns:
        str: The CSV output if debug is True, otherwise None
    """
    print("Input:")
    for expression in expressions:
        print(expression)
    print("\nEvaluating...")

    interpreter = Interpreter()
    try:
        for expression in expressions:
            expression = expression.strip()
            if not expression:
                continue
            value = interpreter.evaluate(expression)
            print(f"  {expression} -> {value}")
    except ExpressionError as e:
        print(f"Error: {e}")
        if debug:
            # Empty CSV output on error
            print("\nVariables (CSV format):")
            print("")
            return ""
        return None

    print("\nOutput:")
    print(interpreter.format_output())

    if debug:
        csv_output = interpreter.get_variables_csv()
        print("\nVariables (CSV format):")
        print(csv_output)
        return csv_output

    return None


if __name__ == "__main__":
    run_expressions([
        "i = 0",
        "j = ++i",
        "x = i++ + 5",
        "y = (5 + 3) * 10",
        "i += y",
    ])
