#!/usr/bin/env python3
"""Manage run configurations of a project."""

import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from runconfig.config import get, load_config, setup_logging
from runconfig.core import ProjectLoader
from runconfig.db import init_db
from runconfig.services import RunConfigurationService

SEVERITY_MARKS = {"ok": "✓", "warning": "⚠️ ", "error": "✗"}


def get_service() -> RunConfigurationService:
    """Build the service for the configured project."""
    init_db(get("database.path") or "run_configurations.db")
    project = ProjectLoader(get("project.declaration") or "project.yaml").load_project()
    return RunConfigurationService(project)


def create_configuration(name: str, module_name: str = None):
    """Create a run configuration."""
    service = get_service()
    configuration = service.create(name, module_name)

    if configuration is None:
        print(f"❌ Run configuration '{name}' already exists. Use set-module to rebind it.")
        return

    print(f"\n✅ Run configuration '{configuration.name}' created.")
    print(f"Module: {configuration.module_name or 'N/A'}")
    print()


def list_configurations():
    """List all run configurations."""
    service = get_service()
    records = service.list_all()

    if not records:
        print("No run configurations found.")
        return

    print(f"\nRun configurations ({service.project.name}):")
    print("="*60)
    for record in records:
        print(f"\n Name: {record['name']}")
        print(f" Module: {record['module_name'] or 'N/A'}")
        print(f" Updated: {record['updated_at']}")
    print("="*60)
    print()


def validate_configurations() -> int:
    """Validate all run configurations; returns the number of errors."""
    service = get_service()
    results = service.validate_all()

    errors = 0
    for result in results:
        mark = SEVERITY_MARKS[result["severity"]]
        line = f" {mark} {result['name']} ({result['module_name'] or 'no module'})"
        if result["message"]:
            line += f": {result['message']}"
        print(line)
        if result["severity"] == "error":
            errors += 1

    print(f"\n{len(results)} checked, {errors} with errors")
    return errors


def set_module(name: str, module_name: str):
    """Rebind a run configuration to another module."""
    service = get_service()
    configuration = service.set_module(name, module_name)

    if configuration is None:
        print(f"❌ Run configuration '{name}' not found.")
        return

    print(f"\n✅ Run configuration '{name}' now targets module '{configuration.module_name}'.")
    print()


def delete_configuration(name: str):
    """Delete a run configuration."""
    service = get_service()

    if not service.delete(name):
        print(f"❌ Run configuration '{name}' not found.")
        return

    print(f"\n✅ Run configuration '{name}' has been deleted.")
    print()


def main():
    parser = argparse.ArgumentParser(description="Manage run configurations")
    parser.add_argument("--config", "-c", help="Path to config.yaml")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Create command
    create_parser = subparsers.add_parser("create", help="Create a run configuration")
    create_parser.add_argument("name", help="Configuration name")
    create_parser.add_argument("--module", "-m", help="Module name (default: first project module)")

    # List command
    subparsers.add_parser("list", help="List run configurations")

    # Validate command
    subparsers.add_parser("validate", help="Validate run configurations against the project")

    # Set-module command
    set_module_parser = subparsers.add_parser("set-module", help="Bind a configuration to a module")
    set_module_parser.add_argument("name", help="Configuration name")
    set_module_parser.add_argument("module", help="Module name")

    # Delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a run configuration")
    delete_parser.add_argument("name", help="Configuration name")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    load_config(args.config)
    setup_logging()

    if args.command == "create":
        create_configuration(args.name, args.module)
    elif args.command == "list":
        list_configurations()
    elif args.command == "validate":
        if validate_configurations():
            sys.exit(1)
    elif args.command == "set-module":
        set_module(args.name, args.module)
    elif args.command == "delete":
        delete_configuration(args.name)


if __name__ == "__main__":
    main()
