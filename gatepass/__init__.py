# Campus Gate-Pass Service
