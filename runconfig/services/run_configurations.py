"""Service for storing and checking a project's run configurations."""

import logging
from typing import Optional, Dict, Any, List

from runconfig.core.module_system import Project
from runconfig.db import get_session
from runconfig.db.models import StoredRunConfiguration
from runconfig.execution.run_configuration import RunConfiguration

logger = logging.getLogger(__name__)


class RunConfigurationService:
    """Persists run configurations of one project in the database."""

    def __init__(self, project: Project):
        self.project = project

    def create(self, name: str, module_name: Optional[str] = None) -> RunConfiguration:
        """
        Create and save a new run configuration.

        Args:
            name: Configuration name
            module_name: Module to bind; defaults to the project's first module

        Returns:
            The saved configuration, or None if one with this name already exists
        """
        if self.exists(name):
            logger.warning(f"Run configuration already exists: {name}")
            return None

        configuration = RunConfiguration.create(name, self.project)
        if module_name:
            configuration.configuration_module.set_module_name(module_name)
        self.save(configuration)
        return configuration

    def exists(self, name: str) -> bool:
        """Check whether a run configuration with this name is stored."""
        with get_session() as session:
            return session.query(StoredRunConfiguration).filter_by(
                project=self.project.name, name=name
            ).first() is not None

    def save(self, configuration: RunConfiguration) -> Dict[str, Any]:
        """
        Insert or update a run configuration.

        Args:
            configuration: Configuration to store

        Returns:
            Stored record as a dict
        """
        state_xml = configuration.to_xml()
        with get_session() as session:
            record = session.query(StoredRunConfiguration).filter_by(
                project=self.project.name, name=configuration.name
            ).first()

            if record:
                record.module_name = configuration.module_name
                record.state_xml = state_xml
            else:
                record = StoredRunConfiguration(
                    project=self.project.name,
                    name=configuration.name,
                    module_name=configuration.module_name,
                    state_xml=state_xml,
                )
                session.add(record)

            session.commit()
            logger.info(f"Saved run configuration: {configuration.name} -> {configuration.module_name or '<none>'}")
            return record.to_dict()

    def load(self, name: str) -> Optional[RunConfiguration]:
        """Load a run configuration by name, or None if it is not stored."""
        with get_session() as session:
            record = session.query(StoredRunConfiguration).filter_by(
                project=self.project.name, name=name
            ).first()
            if not record:
                return None
            state_xml = record.state_xml

        configuration = RunConfiguration.from_xml(state_xml, self.project)
        return configuration

    def set_module(self, name: str, module_name: str) -> Optional[RunConfiguration]:
        """Rebind a stored configuration to another module by name."""
        configuration = self.load(name)
        if configuration is None:
            return None
        configuration.configuration_module.set_module_name(module_name)
        self.save(configuration)
        return configuration

    def delete(self, name: str) -> bool:
        """Delete a stored run configuration."""
        with get_session() as session:
            record = session.query(StoredRunConfiguration).filter_by(
                project=self.project.name, name=name
            ).first()
            if record:
                session.delete(record)
                session.commit()
                logger.info(f"Deleted run configuration: {name}")
                return True
            return False

    def list_all(self) -> List[Dict[str, Any]]:
        """List stored run configurations of the project, ordered by name."""
        with get_session() as session:
            records = (
                session.query(StoredRunConfiguration)
                .filter_by(project=self.project.name)
                .order_by(StoredRunConfiguration.name)
                .all()
            )
            return [r.to_dict() for r in records]

    def validate_all(self) -> List[Dict[str, Any]]:
        """
        Validate every stored configuration against the current project state.

        Returns:
            List of dicts with name, module_name, severity and message
        """
        results = []
        for record in self.list_all():
            configuration = RunConfiguration.from_xml(record["state_xml"], self.project)
            result = configuration.validate()
            results.append({
                "name": configuration.name,
                "module_name": configuration.module_name,
                "severity": result.severity.value,
                "message": result.message,
            })
        return results
