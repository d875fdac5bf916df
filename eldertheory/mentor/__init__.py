"""Mentor entities: domain knowledge, domain mentors, learning and knowledge transfer."""