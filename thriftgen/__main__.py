"""Allow running thriftgen with ``python -m thriftgen``."""

from thriftgen.cli.main import main

if __name__ == "__main__":
    main()
