"""
Wrapper to run the dmenu-recent CLI from a checkout.

Usage:
  dmenu_path | dmenu | python main.py | sh
  echo "firefox" | python main.py --count 10 --no-output ~/.dmenu.recent
"""

from dmenu_recent import main


if __name__ == "__main__":
    main()
