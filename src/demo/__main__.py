"""Запуск демонстрации: python -m src.demo"""

from src.demo.driver import main

raise SystemExit(main())
