# -*- coding: utf-8 -*-
from .common import check_happy_path
from .toy_graph import TOY_GRAPH, HAPPY_PATH, first_answer
