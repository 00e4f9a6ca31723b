import streamlit as st

from petnames import langchain_helper as lch
from petnames.errors import PetNameError
from petnames.logger import get_logger
from petnames.prompt import validate_animal_type

log = get_logger()

st.title("ペットの名前ジェネレーター")

animal_type = st.text_input(
    "動物の種類を入力してください:", placeholder="例: 犬、猫、ハムスター"
)

if st.button("名前を生成"):
    try:
        animal_type = validate_animal_type(animal_type)
        with st.spinner("生成中..."):
            pet_names = lch.generate_pet_names(animal_type)
    except PetNameError as e:
        log.error("Pet name generation failed: %s", e)
        st.error(str(e))
    else:
        st.success("生成された名前:")
        for name in pet_names:
            st.write(f"• {name}")
