"""Shared CLI parameter definitions for OBS connection settings.

Each factory returns a ``typer.Option`` for one connection setting. The
``prefix`` argument lets a host application register the same options more
than once under different namespaces, e.g. ``--obs-endpoint`` for the main
store and ``--ruler.obs-endpoint`` for a second one.

Options fall back to the ``OBS_*`` environment variables read by
``ObsSettings`` when the flag is not given on the command line. Prefixed
options use a matching prefixed variable (``ruler.`` becomes ``RULER_``).

Usage:
    @app.command()
    def my_command(
        endpoint: Annotated[Optional[str], obs_endpoint_option()] = None,
        ruler_endpoint: Annotated[
            Optional[str], obs_endpoint_option("ruler.")
        ] = None,
    ):
        pass
"""

import re

import typer


def _flag(prefix: str, name: str) -> str:
    return f"--{prefix}obs-{name}"


def _envvar(prefix: str, name: str) -> str:
    scope = re.sub(r"[^A-Za-z0-9]+", "_", prefix).upper()
    return f"{scope}OBS_{name.replace('-', '_').upper()}"


def obs_endpoint_option(prefix: str = "") -> typer.models.OptionInfo:
    """OBS endpoint option."""
    return typer.Option(
        _flag(prefix, "endpoint"),
        envvar=_envvar(prefix, "endpoint"),
        help="OBS endpoint host or URL",
    )


def obs_bucket_option(prefix: str = "") -> typer.models.OptionInfo:
    """OBS bucket option."""
    return typer.Option(
        _flag(prefix, "bucket"),
        envvar=_envvar(prefix, "bucket"),
        help="OBS bucket name",
    )


def obs_access_key_option(prefix: str = "") -> typer.models.OptionInfo:
    """OBS access key option."""
    return typer.Option(
        _flag(prefix, "access-key"),
        envvar=_envvar(prefix, "access-key"),
        help="OBS access key",
    )


def obs_secret_key_option(prefix: str = "") -> typer.models.OptionInfo:
    """OBS secret key option."""
    return typer.Option(
        _flag(prefix, "secret-key"),
        envvar=_envvar(prefix, "secret-key"),
        help="OBS secret key",
        show_default=False,
    )


def obs_region_option(prefix: str = "") -> typer.models.OptionInfo:
    """OBS region option."""
    return typer.Option(
        _flag(prefix, "region"),
        envvar=_envvar(prefix, "region-name"),
        help="Region used for request signing",
    )
