"""Command-line interface for obs-adapter.

This module provides a small CLI over the OBS storage adapter.

Commands:
    - put: Upload a local file to an object key
    - get: Stream an object to stdout or a local file
    - delete: Delete an object
    - list: List object keys and common prefixes under a prefix
    - check-config: Validate connection settings without contacting the store

Connection options fall back to the OBS_ENDPOINT, OBS_BUCKET, OBS_ACCESS_KEY,
OBS_SECRET_KEY and OBS_REGION_NAME environment variables.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    obs_access_key_option,
    obs_bucket_option,
    obs_endpoint_option,
    obs_region_option,
    obs_secret_key_option,
)
from .core.exceptions import ObjectNotFoundError, ObsAdapterError
from .objectstorage import ObsStorage
from .schemas import ObsStorageConfig, validate_obs_config

app = typer.Typer(
    name="obs-adapter",
    help="Put, get, delete and list objects in an OBS bucket.",
    no_args_is_help=True,
)

CHUNK_SIZE = 1024 * 1024

EndpointOption = Annotated[Optional[str], obs_endpoint_option()]
BucketOption = Annotated[Optional[str], obs_bucket_option()]
AccessKeyOption = Annotated[Optional[str], obs_access_key_option()]
SecretKeyOption = Annotated[Optional[str], obs_secret_key_option()]
RegionOption = Annotated[str, obs_region_option()]


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"obs-adapter {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    OBS-Adapter: object operations against an S3-compatible OBS bucket.
    """
    pass


def _create_config(
    endpoint: Optional[str],
    bucket: Optional[str],
    access_key: Optional[str],
    secret_key: Optional[str],
    region_name: str,
) -> ObsStorageConfig:
    """Build the storage configuration from command-line options."""
    return ObsStorageConfig(
        endpoint=endpoint or "",
        bucket=bucket or "",
        access_key=access_key or "",
        secret_key=secret_key or "",
        region_name=region_name,
    )


def _fail(error: Exception) -> None:
    if isinstance(error, ObjectNotFoundError):
        typer.echo(f"Not found: {error.key}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command("put")
def put_cmd(
    key: Annotated[str, typer.Argument(help="Object key to write")],
    source: Annotated[
        Path,
        typer.Argument(
            help="Local file to upload", exists=True, dir_okay=False, readable=True
        ),
    ],
    endpoint: EndpointOption = None,
    bucket: BucketOption = None,
    access_key: AccessKeyOption = None,
    secret_key: SecretKeyOption = None,
    region_name: RegionOption = "us-east-1",
) -> None:
    """
    Upload a local file, creating or overwriting the object.

    Example:
        obs-adapter put blocks/meta.json ./meta.json --obs-bucket metrics
    """
    try:
        config = _create_config(endpoint, bucket, access_key, secret_key, region_name)
        storage = ObsStorage(config)
        with source.open("rb") as data:
            storage.put_object(key, data)
        typer.echo(f"Uploaded {source} to {key}")
    except ObsAdapterError as e:
        _fail(e)


@app.command("get")
def get_cmd(
    key: Annotated[str, typer.Argument(help="Object key to read")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    endpoint: EndpointOption = None,
    bucket: BucketOption = None,
    access_key: AccessKeyOption = None,
    secret_key: SecretKeyOption = None,
    region_name: RegionOption = "us-east-1",
) -> None:
    """
    Stream an object's content to stdout or to a file.
    """
    try:
        config = _create_config(endpoint, bucket, access_key, secret_key, region_name)
        stream = ObsStorage(config).get_object(key)
        if output is None:
            for chunk in iter(lambda: stream.read(CHUNK_SIZE), b""):
                typer.echo(chunk, nl=False)
        else:
            with output.open("wb") as fh:
                for chunk in iter(lambda: stream.read(CHUNK_SIZE), b""):
                    fh.write(chunk)
            typer.echo(f"Downloaded {key} to {output}")
    except ObsAdapterError as e:
        _fail(e)


@app.command("delete")
def delete_cmd(
    key: Annotated[str, typer.Argument(help="Object key to delete")],
    missing_ok: Annotated[
        bool,
        typer.Option("--missing-ok", help="Succeed when the object does not exist"),
    ] = False,
    endpoint: EndpointOption = None,
    bucket: BucketOption = None,
    access_key: AccessKeyOption = None,
    secret_key: SecretKeyOption = None,
    region_name: RegionOption = "us-east-1",
) -> None:
    """
    Delete an object. Fails when it does not exist unless --missing-ok is given.
    """
    try:
        config = _create_config(endpoint, bucket, access_key, secret_key, region_name)
        ObsStorage(config).delete_object(key, missing_ok=missing_ok)
        typer.echo(f"Deleted {key}")
    except ObsAdapterError as e:
        _fail(e)


@app.command("list")
def list_cmd(
    prefix: Annotated[str, typer.Argument(help="Key prefix to list under")] = "",
    delimiter: Annotated[
        str, typer.Option("--delimiter", "-d", help="Grouping delimiter")
    ] = "/",
    endpoint: EndpointOption = None,
    bucket: BucketOption = None,
    access_key: AccessKeyOption = None,
    secret_key: SecretKeyOption = None,
    region_name: RegionOption = "us-east-1",
) -> None:
    """
    List object keys and common prefixes under a prefix.

    Common prefixes are printed with a leading "PRE ", like the AWS CLI.

    Example:
        obs-adapter list blocks/ --obs-bucket metrics
    """
    try:
        config = _create_config(endpoint, bucket, access_key, secret_key, region_name)
        result = ObsStorage(config).list_objects(prefix, delimiter)

        for common_prefix in result.common_prefixes:
            typer.echo(f"PRE {common_prefix}")
        for key in result.objects:
            typer.echo(key)

    except ObsAdapterError as e:
        _fail(e)


@app.command("check-config")
def check_config_cmd(
    endpoint: EndpointOption = None,
    bucket: BucketOption = None,
    access_key: AccessKeyOption = None,
    secret_key: SecretKeyOption = None,
    region_name: RegionOption = "us-east-1",
) -> None:
    """
    Validate connection settings without contacting the store.
    """
    try:
        config = _create_config(endpoint, bucket, access_key, secret_key, region_name)
        validate_obs_config(config)
        typer.echo(f"Configuration OK: bucket {config.bucket} at {config.endpoint}")
    except ObsAdapterError as e:
        _fail(e)


if __name__ == "__main__":
    app()
