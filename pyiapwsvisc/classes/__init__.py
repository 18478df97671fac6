from .classes import prop_var, class_dic
