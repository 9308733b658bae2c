"""
Verify app-only Microsoft Graph credentials with the mail client.

Acquires a client-credentials token, lists the mailbox's folders and reads the
most recent messages. Nothing is sent, moved or deleted.

Usage:
    python scripts/verify_graph_credentials.py
    python scripts/verify_graph_credentials.py --top 3

Required environment variables in .env:
    AZURE_TENANT_ID=your-tenant-id
    AZURE_CLIENT_ID=your-client-id
    AZURE_CLIENT_SECRET=your-client-secret
    GRAPH_USER_ID=mailbox@yourdomain.com
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from azure.core.exceptions import ClientAuthenticationError

from graph_email_client import InvalidArgument, MailClient
from graph_email_client.utils.logger import get_logger


def print_header(text: str) -> None:
    """Print a formatted header."""
    print(f"\n{'='*60}")
    print(f"  {text}")
    print(f"{'='*60}\n")


def print_success(text: str) -> None:
    print(f"[OK] {text}")


def print_error(text: str) -> None:
    print(f"[ERROR] {text}")


def print_info(text: str) -> None:
    print(f"[INFO] {text}")


async def verify_application(top: int) -> bool:
    """Verify Application permissions: token, folders, recent messages."""
    print_header("Microsoft Graph API - Application Permissions")

    try:
        client = MailClient.from_env(logger=get_logger("graph_email_client.verify"))
    except InvalidArgument as e:
        print_error(str(e))
        print_info("Add the missing values to your .env file")
        return False
    print_success("Client created")

    print_header("Testing Authentication")
    try:
        token = client.credential.acquire_token()
        print_success(f"Access token acquired (expires: {token.expires_on})")
    except ClientAuthenticationError as e:
        print_error(f"Failed to acquire token: {e.message}")
        print_info("Check your AZURE_TENANT_ID, AZURE_CLIENT_ID, and AZURE_CLIENT_SECRET")
        return False

    print_header("Testing Graph API Access")
    folders = await client.list_folders()
    if not folders.ok:
        print_error(f"Failed to list folders: {folders.error.message}")
        if folders.error.status_code == 403:
            print_info("Permission denied. Make sure you have:")
            print_info("  1. Added Application (not Delegated) Mail.ReadWrite permission")
            print_info("  2. Granted ADMIN CONSENT in Azure Portal")
        elif folders.error.code in ("ResourceNotFound", "MailboxNotFound", "ErrorInvalidUser"):
            print_info("Mailbox not found; check that GRAPH_USER_ID is a valid address")
        return False
    print_success(f"Retrieved {len(folders.value)} folders")
    for folder in folders.value:
        print(f"    {folder.displayName} ({folder.unreadItemCount} unread / {folder.totalItemCount})")

    messages = await client.read_emails(top)
    if not messages.ok:
        print_error(f"Failed to read messages: {messages.error.message}")
        return False
    if not messages.value:
        print_success("API access works! (No messages found)")
    else:
        print_success(f"Retrieved {len(messages.value)} messages")
        print_header("Recent Emails")
        for i, msg in enumerate(messages.value, 1):
            sender = msg.from_.emailAddress.address if msg.from_ else "Unknown"
            read_status = "Read" if msg.isRead else "Unread"
            received = (msg.receivedDateTime or "Unknown")[:19]
            print(f"{i}. [{read_status}] {received}")
            print(f"   From: {sender}")
            print(f"   Subject: {msg.subject or '(No subject)'}")
            print(f"   ID: {msg.id[:30]}...")
            print()

    print_header("Verification Complete")
    print_success("All checks passed! Application permissions are working.")
    return True


def main():
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(description="Verify Microsoft Graph app credentials")
    parser.add_argument("--top", type=int, default=5, help="Number of recent messages to read")
    args = parser.parse_args()

    success = asyncio.run(verify_application(args.top))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
