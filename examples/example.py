"""Example usage of the Fractal Python SDK."""
# Copyright (c) 2025 Fractal Global. All rights reserved.

import logging
import os
from concurrent.futures import ThreadPoolExecutor

from fractal_api import FractalClient, Relationship
from fractal_api.exceptions import AuthorizationError, ClientError, FractalError


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

APP_ID = os.environ.get("FRACTAL_APP_ID", "example-app")
APP_SECRET = os.environ.get("FRACTAL_APP_SECRET", "AAAAAAAAAAAAAAAAAAAAAAAAAAA=")


def main() -> None:
    """Execute main example function."""
    # Initialize client against the development server
    client = FractalClient.dev()

    try:
        # Example 1: Application token
        logger.info("=== Token Example ===")

        app_token = client.oauth.token(APP_ID, APP_SECRET)
        logger.info(
            "Token issued for %s, expires at %s",
            app_token.app_id,
            app_token.expiration.isoformat(),
        )

        # Example 2: Login as a user
        logger.info("=== Login Example ===")

        user_token = client.public.login(app_token, "user@example.com", "password")
        user_id = user_token.get_user_id()
        me = client.user.get_me(user_token)
        logger.info("Welcome, %s! (ID: %s)", me.username, user_id)
        if not me.email.confirmed:
            client.public.resend_email_confirmation(user_token)
            logger.info("Email confirmation sent again")

        # Example 3: Friends
        logger.info("=== Friends Example ===")

        stranger = client.user.search_user_random(user_token)
        logger.info("Found %s (trust score %s)", stranger.display_name, stranger.trust_score)
        client.friends.send_friend_request(
            user_token, stranger.id, Relationship.ACQUAINTANCE, "Hello from the SDK"
        )
        for request in client.friends.get_friend_requests(user_token, user_id):
            logger.info("Pending request from user %s", request.origin_user)

        # Example 4: Send credits
        logger.info("=== Transaction Example ===")

        try:
            client.transactions.new_transaction(user_token, "fr1wallet", stranger.id, 10)
            logger.info("Sent 10 credits to %s", stranger.username)
        except ClientError as e:
            logger.info("Transaction refused: %s", e.message)

        # Example 5: Local scope checks
        logger.info("=== Scope Example ===")

        try:
            client.user.get_all_users(user_token)
        except AuthorizationError:
            logger.info("User tokens cannot list all users")

    except FractalError as e:
        logger.exception("API error: %s (Status: %s)", e.message, e.status_code)
    finally:
        # Always close the client
        client.close()


def concurrent_requests_example() -> None:
    """Demonstrate sharing one client and token between threads."""
    logger.info("=== Concurrent Requests Example ===")

    with FractalClient.dev() as client:
        token = client.oauth.token(APP_ID, APP_SECRET)
        user_token = client.public.login(token, "user@example.com", "password")

        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [
                pool.submit(client.user.search_user_random, user_token)
                for _ in range(4)
            ]

        for i, future in enumerate(futures):
            try:
                profile = future.result()
                logger.info("Task %s found %s", i, profile.username)
            except FractalError as e:
                logger.error("Task %s failed: %s", i, e)


if __name__ == "__main__":
    # Run the main example
    main()

    # Run concurrent requests example
    concurrent_requests_example()
