from .driver import run

try:
    run()
except (KeyboardInterrupt, EOFError):
    print("Interrupted")
