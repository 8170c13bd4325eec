#!filepath: tea_timer/utils/__init__.py
