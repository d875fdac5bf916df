"""Erudite entities: task learners, loss functions, learning bounds and task models."""