"""
Core: представления чисел, протокол конверсии и примитивы арифметики.

Модули не зависят от evaluator/REPL и не выполняют I/O.
"""
