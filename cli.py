"""CLI: generate a conversation title for a prompt. For the API, use: python run_api.py."""
import sys

from dotenv import load_dotenv

load_dotenv()

from app.core.titles import generate_title_from_user_message

if __name__ == "__main__":
    prompt = " ".join(sys.argv[1:]) or "Plan a trip to Japan"
    print(generate_title_from_user_message({"role": "user", "content": prompt}))
