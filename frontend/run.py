# frontend/run.py
# Entry point for the landing page. Puts frontend/ on sys.path so the
# cluemart_web package imports without being installed.

import sys
import os


def main():
    """
    Sets up the Python path and runs the frontend application.
    """
    project_root = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_root)

    print("Initializing frontend application...")

    from cluemart_web.main import main as run_frontend_app

    run_frontend_app()


if __name__ == "__main__":
    main()
