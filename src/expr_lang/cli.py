import sys
import argparse
import os

from .errors import ExpressionError
from .interpreter import Interpreter


def read_expressions(filename):
    """Reads one expression per line, skipping blank lines and '#' comments."""
    with open(filename, 'r') as file:
        lines = [line.strip() for line in file]
    return [line for line in lines if line and not line.startswith('#')]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Arithmetic expression interpreter')
    parser.add_argument('filename', help='File with one expression per line')
    parser.add_argument('--debug', action='store_true', help='Save the variable table in CSV format')

    args = parser.parse_args(argv)

    try:
        expressions = read_expressions(args.filename)
        interpreter = Interpreter()
        interpreter.process_expressions(expressions)
        print(interpreter.format_output())

        if args.debug:
            # Replace the input extension with .csv
            csv_filename = os.path.splitext(args.filename)[0] + '.csv'
            with open(csv_filename, 'w', newline='') as csvfile:
                csvfile.write(interpreter.get_variables_csv())
            print(f"\nVariables saved to: {csv_filename}")

    except FileNotFoundError:
        print(f"Error: File '{args.filename}' not found")
        sys.exit(1)
    except ExpressionError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
