"""Main CLI entry point"""

import sys
import json
import logging
import argparse
from dataclasses import asdict, is_dataclass

from ..core.connection import Web3Manager
from ..core.networks import default_resolver
from ..pools.balancer import Pool


def emit(result):
    """Print a result as JSON"""
    if is_dataclass(result):
        result = asdict(result)
    print(json.dumps(result, indent=2, default=str))


def make_pool(args, check_connection=True):
    manager = Web3Manager(network=args.network, check_connection=check_connection)
    return Pool(manager)


def cmd_network(args):
    """Show the deployment record for a network"""
    emit(default_resolver().get_config(args.name).to_dict())


def cmd_networks(args):
    """List configured networks"""
    emit(default_resolver().networks())


def cmd_pool_info(args):
    """Query pool state"""
    pool = make_pool(args)
    address = args.pool
    finalized = pool.is_finalized(address)
    tokens = pool.get_final_tokens(address) if finalized else pool.get_current_tokens(address)

    token_info = []
    for token in tokens or []:
        token_info.append({
            "address": token,
            "reserve": pool.get_reserve(address, token),
            "normalized_weight": pool.get_normalized_weight(address, token),
            "denormalized_weight": pool.get_denormalized_weight(address, token),
        })

    emit({
        "address": address,
        "finalized": finalized,
        "controller": pool.get_controller(address),
        "base_token": pool.get_base_token(address),
        "datatoken": pool.get_datatoken(address),
        "tokens": token_info,
        "total_supply": pool.get_pool_shares_total_supply(address),
        "total_denormalized_weight": pool.get_total_denormalized_weight(address),
        "swap_fee": pool.get_swap_fee(address),
        "market_fee": pool.get_market_fee(address),
        "market_fee_collector": pool.get_market_fee_collector(address),
        "opc_collector": pool.get_opc_collector(address),
    })


def cmd_spot_price(args):
    """Query spot price"""
    pool = make_pool(args)
    emit({
        "pool": args.pool,
        "token_in": args.token_in,
        "token_out": args.token_out,
        "spot_price": pool.get_spot_price(args.pool, args.token_in, args.token_out, args.market_fee),
    })


def cmd_quote_in(args):
    """Quote the amount in needed for an exact amount out"""
    pool = make_pool(args)
    emit(pool.get_amount_in_exact_out(args.pool, args.token_in, args.token_out, args.amount, args.market_fee))


def cmd_quote_out(args):
    """Quote the amount out received for an exact amount in"""
    pool = make_pool(args)
    emit(pool.get_amount_out_exact_in(args.pool, args.token_in, args.token_out, args.amount, args.market_fee))


def cmd_events(args):
    """Print pool event log topics"""
    pool = make_pool(args, check_connection=False)
    emit({
        "LOG_SWAP": pool.get_swap_event_signature(),
        "LOG_JOIN": pool.get_join_event_signature(),
        "LOG_EXIT": pool.get_exit_event_signature(),
    })


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bpool",
        description="bpool-client - query two-token weighted pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  bpool networks
  bpool network rinkeby
  bpool pool info 0xPOOL
  bpool pool spot-price 0xPOOL 0xTOKEN_IN 0xTOKEN_OUT --market-fee 0.001
  bpool pool quote-out 0xPOOL 0xTOKEN_IN 0xTOKEN_OUT 10
  bpool pool events

configuration:
  RPC_URL, NETWORK   Set in .env file
  networks           config/networks.json (overrides the packaged table)
  gas                config/gas_config.json
""",
    )
    parser.add_argument("--network", help="Network name (default: NETWORK env var or first configured)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    network_parser = subparsers.add_parser("network", help="Show a network's deployment record")
    network_parser.add_argument("name", help="Network name")
    network_parser.set_defaults(func=cmd_network)

    networks_parser = subparsers.add_parser("networks", help="List configured networks")
    networks_parser.set_defaults(func=cmd_networks)

    pool_parser = subparsers.add_parser("pool", help="Pool queries")
    pool_sub = pool_parser.add_subparsers(dest="pool_command")

    info_parser = pool_sub.add_parser("info", help="Pool state")
    info_parser.add_argument("pool", help="Pool address")
    info_parser.set_defaults(func=cmd_pool_info)

    spot_parser = pool_sub.add_parser("spot-price", help="Spot price of token_out in token_in")
    spot_parser.add_argument("pool", help="Pool address")
    spot_parser.add_argument("token_in", help="Token paid")
    spot_parser.add_argument("token_out", help="Token bought")
    spot_parser.add_argument("--market-fee", default="0", help="Consume market fee fraction (default: 0)")
    spot_parser.set_defaults(func=cmd_spot_price)

    for name, func, help_text in (
        ("quote-in", cmd_quote_in, "Amount in for an exact amount out"),
        ("quote-out", cmd_quote_out, "Amount out for an exact amount in"),
    ):
        quote_parser = pool_sub.add_parser(name, help=help_text)
        quote_parser.add_argument("pool", help="Pool address")
        quote_parser.add_argument("token_in", help="Token paid")
        quote_parser.add_argument("token_out", help="Token bought")
        quote_parser.add_argument("amount", help="Exact amount (human units)")
        quote_parser.add_argument("--market-fee", default="0", help="Consume market fee fraction (default: 0)")
        quote_parser.set_defaults(func=func)

    events_parser = pool_sub.add_parser("events", help="Event log topics")
    events_parser.set_defaults(func=cmd_events)

    return parser, pool_parser


def main(argv=None):
    parser, pool_parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "pool" and not args.pool_command:
        pool_parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
