"""Who may administer pools and act on positions."""

from dataclasses import dataclass, field

from .pubkey import Pubkey

PROGRAM_ID = Pubkey.from_base58("LBUZKhRxPF3XUpBCjp4YzTKgLccjZhTSDM9YuVaPwxo")

# Authorised to withdraw protocol fees.
FEE_OWNER = Pubkey.from_base58("6WaLrrRfReGKBYUSkmx2K6AuT21ida4j8at2SUiZdXu8")

ADMINS = tuple(
    Pubkey.from_base58(text)
    for text in (
        "5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi",
        "ChSAh3XXTxpp5n2EmgSCm6vVvVPoD1L9VrK3mcQkYz7m",
        "DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX",
    )
)

LAUNCH_POOL_CONFIG_ADMINS = tuple(
    Pubkey.from_base58(text)
    for text in (
        "4Qo6nr3CqiynvnA3SsbBtzVT3B1pmqQW4dwf2nFmnzYp",
        "5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi",
        "ChSAh3XXTxpp5n2EmgSCm6vVvVPoD1L9VrK3mcQkYz7m",
        "DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX",
    )
)


@dataclass(frozen=True)
class PositionOwnership:
    """The parties with rights over a position; fee_owner may be unset."""

    owner: Pubkey
    operator: Pubkey
    fee_owner: Pubkey = field(default_factory=Pubkey.default)


def is_admin(admin: Pubkey) -> bool:
    """Whether the key is one of the protocol admins."""
    return admin in ADMINS


def is_launch_pool_admin(admin: Pubkey) -> bool:
    """Whether the key may configure launch pools."""
    return admin in LAUNCH_POOL_CONFIG_ADMINS


def authorize_modify_position(position: PositionOwnership, sender: Pubkey) -> bool:
    """The owner or operator may change a position's liquidity."""
    return sender in (position.owner, position.operator)


def authorize_claim_fee_position(position: PositionOwnership, sender: Pubkey) -> bool:
    """Owner or operator may claim fees; with a fee owner set, so may it and launch pool admins."""
    if position.fee_owner == Pubkey.default():
        return sender in (position.owner, position.operator)
    return sender in (
        position.owner,
        position.operator,
        position.fee_owner,
    ) or is_launch_pool_admin(sender)