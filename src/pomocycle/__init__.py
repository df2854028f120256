"""
A polled pomodoro cycle: work and break intervals, and a queue of tasks to be
retired as the work gets done.
"""
