import logging
import sys
from collections import namedtuple
from importlib.resources import as_file, files
from pathlib import Path
from pprint import pformat

import numpy as np
import pandas as pd
import tqdm
import typer
import yaml

from rtnorm.basic_samplers import rtnorm
from rtnorm.config import get_default_cli_config
from rtnorm.support_utils import truncated_normal_moments, truncated_normal_pdf

app = typer.Typer(add_completion=False)

CHUNK_SIZE = 10_000


def parse_dict_as_namedtuple(d: dict, to_lowercase: bool = True):
    """Convert a dictionary to a named tuple."""
    d = {k.lower() if to_lowercase else k: v for k, v in d.items()}
    return namedtuple("Config", d.keys())(**d)


def get_run_config_from_yaml(yaml_config_path, overrides: dict | None = None):
    """Load the run configuration from a YAML file.

    Keys missing from the file fall back to ``get_default_cli_config()``;
    non-None entries of ``overrides`` take precedence over both.
    """
    # Handle both file paths and file-like objects (makes mock testing easier)
    if hasattr(yaml_config_path, "read"):
        config_from_yaml = yaml.safe_load(yaml_config_path)
    else:
        with open(yaml_config_path, "rb") as f:
            config_from_yaml = yaml.safe_load(f)

    config = get_default_cli_config()
    config.update({k.lower(): v for k, v in (config_from_yaml or {}).items()})
    config.update({k: v for k, v in (overrides or {}).items() if v is not None})

    unknown = set(config) - set(get_default_cli_config())
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
    return parse_dict_as_namedtuple(config)


def generate_samples(run_config, progress: bool = False) -> pd.DataFrame:
    """Draw ``n_samples`` variates and their densities for a run configuration."""
    rng = np.random.default_rng(run_config.seed)
    a, b = float(run_config.a), float(run_config.b)
    mu, sigma = float(run_config.mu), float(run_config.sigma)

    n = int(run_config.n_samples)
    x = np.empty(n)
    with tqdm.tqdm(total=n, disable=not progress, desc="Sampling") as pbar:
        for start in range(0, n, CHUNK_SIZE):
            stop = min(start + CHUNK_SIZE, n)
            x[start:stop] = rtnorm(a, b, mu, sigma, size=stop - start, rng=rng)
            pbar.update(stop - start)

    return pd.DataFrame({"x": x, "density": truncated_normal_pdf(x, a, b, mu, sigma)})


log_level_option = typer.Option(
    "WARNING",
    "--log-level",
    "-l",
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    case_sensitive=False,
    show_default=True,
    rich_help_panel="Logging",
    metavar="LEVEL",
    autocompletion=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
)

epilog = "Example: `rtnorm-generate -a 1 -b 9 --mu 2 --sigma 3 -n 100000 --output samples.csv`"


@app.command(epilog=epilog)
def main(
    config_path: Path = typer.Option(None, help="Path to the YAML configuration file."),
    output: Path = typer.Option(
        None, help="CSV file to write. If omitted, 'x p(x)' lines go to stdout."
    ),
    a: float = typer.Option(None, "-a", help="Left bound."),
    b: float = typer.Option(None, "-b", help="Right bound."),
    mu: float = typer.Option(None, "--mu", help="Mean of the untruncated Gaussian."),
    sigma: float = typer.Option(None, "--sigma", help="Standard deviation."),
    n_samples: int = typer.Option(
        None, "--n-samples", "-n", help="Number of variates to draw.", min=0
    ),
    seed: int = typer.Option(None, "--seed", help="Seed of the random generator."),
    log_level: str = log_level_option,
):
    """
    Draw pseudorandom numbers from a truncated Gaussian distribution.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    overrides = {
        "a": a,
        "b": b,
        "mu": mu,
        "sigma": sigma,
        "n_samples": n_samples,
        "seed": seed,
    }
    if config_path is None:
        logger.info("No config path provided, using default configuration.")
        with as_file(files("rtnorm.cli") / "config_rtnorm.yaml") as default_config:
            run_config = get_run_config_from_yaml(default_config, overrides=overrides)
    else:
        run_config = get_run_config_from_yaml(config_path, overrides=overrides)

    logger.debug("RUN CONFIG")
    logger.debug(pformat(run_config._asdict()))

    df = generate_samples(run_config, progress=output is not None)

    if len(df) > 0:
        mean, var = truncated_normal_moments(
            run_config.a, run_config.b, run_config.mu, run_config.sigma
        )
        logger.info(
            "Empirical mean %.6f (expected %.6f), variance %.6f (expected %.6f)",
            df["x"].mean(),
            mean,
            df["x"].var(ddof=0),
            var,
        )

    if output is None:
        typer.echo(f"underlying distribution: Normal({run_config.mu:f}, {run_config.sigma:f})")
        typer.echo(f"truncated interval: [{run_config.a:f}, {run_config.b:f}]")
        df.to_csv(sys.stdout, sep=" ", header=False, index=False, float_format="%f")
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Saving %d samples to: %s", len(df), output)
        df.to_csv(output, index=False)
        logger.info("Samples saved successfully.")


if __name__ == "__main__":
    app()
