"""Allow running rmview with ``python -m rmview``."""

from rmview.cli import main

if __name__ == "__main__":
    main()
