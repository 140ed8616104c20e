from expr_lang import run_expressions

run_expressions(["i = 0", "j = ++i", "x = i++ + 5", "y = (5 + 3) * 10", "i += y"])
run_expressions(["a = 10", "b = 20", "c = ( a + b ) * 2"])

# Run with debug mode enabled to get CSV output
run_expressions(["num = 100", "num += 50", "num *= 2", "num /= 4"], debug=True)
