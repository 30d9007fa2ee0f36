"""Entry-point script delegating to provisioner.scripts.create_admin."""

from provisioner.scripts.create_admin import main

if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
