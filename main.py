# main.py - launches the terminal search portal

from adaptive_autocompleter.cli.cli import main

if __name__ == "__main__":
    main()
