import logging
import sys
from typing import List, Optional

LOG = logging.getLogger(__name__)


def configure_logging(verbose: int):
    from lingotag_cli.configure import compute_log_level

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        stream=sys.stderr,
        level=compute_log_level(verbose),
        format="%(asctime)s [%(levelname)s][%(filename)s:%(lineno)d][%(funcName)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def list_languages() -> int:
    from lingotag.detector import supported_languages

    for code, name in supported_languages():
        sys.stdout.write(f"{code} - {name}\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    # pylint: disable=import-outside-toplevel
    from argparse import Namespace

    from lingotag.detector import build_detector
    from lingotag.driver import Driver
    from lingotag_cli.args import build_parser
    from lingotag_cli.config_file import load_config_file, merge_args, select_profile
    from lingotag_cli.configure import make_run_config
    from lingotag_cli.env import default_config_path, load_env_file
    from lingotag_core.errors import LingotagError

    parser = build_parser(prog="lingotag")
    base_defaults: Namespace = parser.parse_args([])
    user_args = parser.parse_args(argv)

    if user_args.list:
        return list_languages()

    configure_logging(user_args.verbose)

    # load the values from the .env file, if present
    load_env_file()

    cfg_data = {}
    config_path = user_args.config or default_config_path()
    try:
        if config_path:
            LOG.info("Loading defaults from %s", config_path)
            cfg_data = load_config_file(config_path)
        overrides = select_profile(cfg_data, user_args.profile, known=vars(base_defaults))
    except (FileNotFoundError, ValueError) as exc:
        LOG.error("%s", exc)
        return 1

    args = merge_args(base_defaults, overrides, user_args)
    if args.verbose != user_args.verbose:
        configure_logging(args.verbose)

    try:
        run_config = make_run_config(args)
        detector = build_detector(run_config.detector)
        Driver(run_config, detector, sys.stdout).run(sys.stdin.buffer)
    except LingotagError as exc:
        LOG.error("%s", exc)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
