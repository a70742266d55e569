"""InitService — write a starter skysync.toml for a project."""

from __future__ import annotations

from pathlib import Path

from skysync.config.discovery import CONFIG_FILENAME
from skysync.infrastructure.templates import build_template_environment
from skysync.services.result import ServiceResult


class InitService:
    """Stateless project initialiser (no remote client needed)."""

    @staticmethod
    def init_project(
        path: Path,
        *,
        base_locale: str,
        locales: list[str],
        string_path: str,
        force: bool = False,
    ) -> ServiceResult:
        """Render ``skysync.toml`` into *path*.

        Refuses to replace an existing config unless *force* is set.
        """
        op = "init"
        config_file = path / CONFIG_FILENAME
        if config_file.exists() and not force:
            return ServiceResult.failure(
                op,
                "CONFIG_EXISTS",
                f"{config_file} already exists (use --force to overwrite)",
                path=str(config_file),
            )

        targets = [loc for loc in dict.fromkeys(locales) if loc != base_locale]
        env = build_template_environment("config", project_root=path)
        rendered = env.get_template(f"{CONFIG_FILENAME}.j2").render(
            base_locale=base_locale,
            locales=targets,
            string_path=string_path,
        )

        path.mkdir(parents=True, exist_ok=True)
        config_file.write_text(rendered, encoding="utf-8")

        warnings: list[str] = []
        if not (path / string_path).is_dir():
            warnings.append(f"String path {string_path!r} does not exist yet")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(config_file),
                "base_locale": base_locale,
                "locales": targets,
                "string_path": string_path,
            },
            warnings=warnings,
        )
