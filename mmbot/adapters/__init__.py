"""
适配器层

对外部交易场所的统一抽象
"""
