"""Allow ``python -m genschema``."""

from genschema.main import main

main()
