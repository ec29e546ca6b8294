"""Paired account + owner-membership writes."""

import logging

from account_hierarchy.application.exceptions import CompensationError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount

logger = logging.getLogger(__name__)


async def write_account_with_owner(
    uow: UnitOfWorkPort, account: Account, owner: UserAccount
) -> Account:
    """
    Persist a new account together with its owner membership.

    Must be called inside an open unit of work. On a transactional store both
    rows are committed together, and a failure rolls both back when the unit
    of work exits. On a store without transactions the account row is written
    first and deleted again if the membership write fails.

    Args:
        uow: Open unit of work
        account: Account to create
        owner: Membership linking the owner to the account

    Returns:
        The persisted account

    Raises:
        CompensationError: If the compensating delete fails as well
    """
    if uow.supports_transactions:
        saved_account = await uow.accounts.add(account)
        await uow.memberships.add(owner)
        await uow.commit()
        return saved_account

    saved_account = await uow.accounts.add(account)

    try:
        await uow.memberships.add(owner)
    except Exception as original_error:
        # delete() is a no-op for a missing row, so retrying cleanup is safe
        try:
            await uow.accounts.delete(account.account_id)
        except Exception as cleanup_error:
            logger.error(
                f"Failed to remove account {account.account_id} after membership "
                f"write failed: {cleanup_error} (original error: {original_error})"
            )
            raise CompensationError(
                original_error,
                cleanup_error,
                resource_type="Account",
                resource_id=account.account_id,
            ) from cleanup_error

        logger.warning(
            f"Removed account {account.account_id} after membership write failed: "
            f"{original_error}"
        )
        raise

    await uow.commit()
    return saved_account
