from kriptocalc.classical import register_all

register_all()
