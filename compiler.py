from mincc.cli import main

# Reads input.txt, writes output.c, builds ./program and saves its output in result.txt.
main(prog_name="compiler.py")
