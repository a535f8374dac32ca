import asyncio

from chatbot import config
from chatbot.chat import get_chatbot_response


async def main() -> None:
    chatbot_response = await get_chatbot_response(config.EXAMPLE_PROMPT)
    print(f"Chatbot response: {chatbot_response}")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
