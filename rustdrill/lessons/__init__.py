"""Reference solutions to the course's exercises."""