"""Split a sentence into words with the stock word pipeline."""

from rulelex import lex, print_tokens
from rulelex.rules import word_rules

tokens = lex("Hello there, rule-driven world!", word_rules())
print_tokens(tokens)
