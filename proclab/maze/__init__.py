"""Grid mazes, step-by-step maze generators and a command that prints a maze."""