"""
Module entry point: python -m fishls
"""
from fishls.main import main

if __name__ == "__main__":
    main()
