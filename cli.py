# Role: Local developer CLI to talk to FlowController without the HTTP layer.
# Useful for trying prompts against the real services and seeing debug logs in the terminal.

from __future__ import annotations

import profsync.config
profsync.config.load_env()
profsync.config.configure_logging()

from profsync.core.flow_controller import FlowController


def main(flow: FlowController | None = None) -> None:
    # 1) Create FlowController (one history for the whole CLI session)
    # 2) Route user input -> FlowController -> print the HTML response
    print("ProfSync CLI")
    print("Commands: /history (recent turns), /exit")
    print("-" * 50)

    flow = flow or FlowController()

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/history", "history"}:
            recent = flow.history.recent_window()
            if not recent:
                print("(no turns yet)")
            for turn in recent:
                print(f"[{turn.classification}] {turn.message}")
            continue

        print(f"\nAssistant: {flow.handle_message(user_message)}")


if __name__ == "__main__":
    main()
