import argparse
from pathlib import Path

from navindex.builder import build_initial_state
from navindex.config import settings
from navindex.config.boot_data import load_nav_tree
from navindex.definitions import DEFAULT_NAV_TREE
from navindex.events import BroadcastSubtitle
from navindex.exceptions import NavTreeError
from navindex.logging import LoggerFactory, setup_logging
from navindex.navigator import breadcrumbs, get_nav_model
from navindex.store import NavIndexStore


def format_entry(store: NavIndexStore, nav_id: str) -> str:
    model = get_nav_model(store.state, nav_id)
    if nav_id not in store.state:
        return f"{nav_id}: {model.node.text}"
    trail = " / ".join(node.text for node in breadcrumbs(model.node))
    line = f"{nav_id}: {trail}"
    sub_title = model.node.sub_title
    if sub_title is None and model.node.parent_item is not None:
        sub_title = model.node.parent_item.sub_title
    if sub_title:
        line += f" ({sub_title})"
    return line


def main(argv=None):
    parser = argparse.ArgumentParser(description="Navigation index inspector")
    parser.add_argument("ids", nargs="*", help="Nav ids to look up")
    parser.add_argument("--tree", type=Path, help="Menu tree JSON file")
    parser.add_argument("--org", help="Organization name for admin subtitles")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Log every indexed node")
    parser.add_argument("--log-dir", type=Path, help="Write log files to this directory")
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember --tree and --org for later runs",
    )
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, trace=args.trace, log_dir=args.log_dir)
    log = LoggerFactory.for_config()

    tree_path = args.tree or settings.get_nav_tree_path()
    if tree_path:
        try:
            nav_tree = load_nav_tree(tree_path)
        except NavTreeError as error:
            log.error(str(error))
            return 1
    else:
        log.debug("No menu tree configured, using default definitions")
        nav_tree = DEFAULT_NAV_TREE

    store = NavIndexStore(build_initial_state(nav_tree))

    if args.save:
        settings.remember_sources(nav_tree_path=args.tree, organization_name=args.org)

    organization_name = args.org or settings.get_organization_name()
    if organization_name:
        store.dispatch(BroadcastSubtitle(organization_name=organization_name))

    if not args.ids:
        for nav_id in sorted(store.state):
            print(nav_id)
        return 0

    for nav_id in args.ids:
        print(format_entry(store, nav_id))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
