#!/usr/bin/env python3
"""Generate a sample file of validated accounts.

Settings come from the environment (see ``AccountModelConfig.from_env``);
the file can be used to exercise a payment submission layer by hand.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_model.config import AccountModelConfig
from account_model.generators import AccountBuilderGenerator
from account_model.logging import get_logger, setup_logging
from account_model.serialization import to_dict

logger = get_logger("generate_sample_accounts")


def main() -> None:
    """Generate accounts and write them as a JSON array."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=10, help="number of accounts")
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "local" / "accounts.json",
        help="output file",
    )
    args = parser.parse_args()

    config = AccountModelConfig.from_env()
    setup_logging(config.logging.level, config.logging.format_type)

    gen = AccountBuilderGenerator(
        seed=config.generator.seed,
        locale=config.generator.locale,
        business_ratio=config.generator.business_ratio,
        include_number=config.generator.include_number,
        include_iban=config.generator.include_iban,
    )
    accounts = [to_dict(account) for account in gen.generate_batch(args.count)]

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(accounts, f, indent=2, ensure_ascii=False)
    logger.info("Saved %d accounts to %s", len(accounts), args.output)


if __name__ == "__main__":
    main()
